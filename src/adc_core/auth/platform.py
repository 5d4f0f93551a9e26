"""Operating system classification for well-known credential paths."""

import enum
import platform as _platform


class Platform(enum.Enum):
    """Platform families that differ in where ambient credentials live."""

    WINDOWS = "windows"
    POSIX = "posix"

    @classmethod
    def from_system_name(cls, system_name: str) -> "Platform":
        """Classify a system name such as ``"Linux"`` or ``"Windows_NT"``.

        Any name starting with ``win`` (case-insensitive) is Windows-family.
        """
        if system_name[:3].upper() == "WIN":
            return cls.WINDOWS
        return cls.POSIX

    @classmethod
    def detect(cls) -> "Platform":
        """Classify the running interpreter's operating system."""
        return cls.from_system_name(_platform.system())

    @property
    def root_env_var(self) -> str:
        """Environment variable holding the root of the well-known path."""
        return "APPDATA" if self is Platform.WINDOWS else "HOME"
