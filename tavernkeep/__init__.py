"""Role-playing characters, four character classes, a fixed-capacity bag and taverns that track their guests."""

__version__ = "0.1.0"