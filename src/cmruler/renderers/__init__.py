from .ruler import Baseline, DrawInstruction, Label, Panel, RulerRenderer, Tick

__all__ = ["Baseline", "DrawInstruction", "Label", "Panel", "RulerRenderer", "Tick"]
