"""skillcraft: the Skill aggregate of an educational-content authoring tool."""

__version__ = "0.1.0"
