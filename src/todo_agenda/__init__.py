"""
Todo Agenda backend package.

The ASGI application lives in ``todo_agenda.main`` (``todo_agenda.main:app``);
``todo_agenda.main.create_app`` builds one from explicit settings.
"""

__version__ = "0.1.0"
