from .console_ui_manager import ConsoleUIManager, ProgressTicker

__all__ = ['ConsoleUIManager', 'ProgressTicker']
