"""
Skill bounded context - Domain layer.

This context models the Skill authoring features:
- Misconceptions learners commonly hold about a skill
- Rubrics describing mastery at each difficulty
- The concept card used to teach the skill
- Content-quality validation before publishing

Aggregates:
- Skill: The aggregate root owning its misconceptions, rubrics and concept card
"""
