"""
Application layer.

The application layer orchestrates domain objects. For skills it applies
edit commands coming from the editor UI to one Skill aggregate, one at a
time.

This layer contains:
- Commands: Edits that change a skill
- Command Handlers: Apply one command type to the skill
- Result: Success or failure of an edit, without exceptions
"""
