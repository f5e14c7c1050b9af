from .ruler_widget import RulerWidget

__all__ = ['RulerWidget']
