"""
Multiple-choice quiz.

Components:
- quiz_models.py: Question (with answer index normalization), QuizResult
- quiz_loader.py: quiz file blocks -> Question list
- quiz_runner.py: asks questions on a text stream and keeps the score
"""
