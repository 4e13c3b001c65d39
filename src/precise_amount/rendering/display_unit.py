from __future__ import annotations

from enum import Enum


class DisplayUnit(Enum):
    """When the unit is shown next to the number.

    Members:
        AUTO: Show the unit only if the Amount has one (default).
        NEVER: Never show the unit.
        ALWAYS: Always show a unit; the "unit unit" `1` stands in when the Amount has none.
    """

    AUTO = "auto"
    NEVER = "never"
    ALWAYS = "always"

    @classmethod
    def from_str(cls, value: DisplayUnit | str) -> DisplayUnit:
        """Resolve a DisplayUnit from its value ("auto", "never", "always"), case-insensitively.

        Raises:
            ValueError: If $value is not a known display-unit option.
        """
        if isinstance(value, DisplayUnit):
            return value

        # Raise: only the three documented options are accepted
        if not isinstance(value, str) or value.strip().lower() not in _DISPLAY_UNIT_BY_VALUE:
            raise ValueError(f"$display_unit must be one of {list(_DISPLAY_UNIT_BY_VALUE)}, but provided value is: {value!r}")

        return _DISPLAY_UNIT_BY_VALUE[value.strip().lower()]


_DISPLAY_UNIT_BY_VALUE = {member.value: member for member in DisplayUnit}
