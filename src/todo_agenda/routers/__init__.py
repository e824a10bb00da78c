"""API routers for the todo and agenda resources."""
