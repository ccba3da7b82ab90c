"""
Domain layer.

The domain layer contains the Skill aggregate and its sub-entities.
It has no dependencies on external frameworks or infrastructure.

This layer contains:
- Entities: Skill, Misconception, Rubric, ConceptCard
- Value Objects: identifiers, SubtitledHtml, Voiceover
- Aggregate Roots: Skill, the consistency boundary for its children
- Domain Events: what happened to a Skill while it was being edited
"""
