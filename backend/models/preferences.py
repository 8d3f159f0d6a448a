from enum import Enum


class ThemePreference(str, Enum):
    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def from_stored(cls, value: str | None) -> "ThemePreference":
        # Only the literal "light" selects light mode; anything else is dark.
        return cls.LIGHT if value == cls.LIGHT.value else cls.DARK

    def toggled(self) -> "ThemePreference":
        return ThemePreference.DARK if self is ThemePreference.LIGHT else ThemePreference.LIGHT
