from enum import Enum


class TickTier(Enum):
    """Visual weight of a tick mark."""
    MAJOR = "major"  # Whole centimeter, labeled
    HALF = "half"    # 5 mm
    EVEN = "even"    # 2, 4, 6, 8 mm
    ODD = "odd"      # 1, 3, 7, 9 mm

    @classmethod
    def for_minor(cls, index: int) -> "TickTier":
        """Tier of the minor tick at millimeter index 1..9 within a centimeter."""
        if index == 5:
            return cls.HALF
        if index % 2 == 0:
            return cls.EVEN
        return cls.ODD
