"""
Quiz module for generating draft quizzes from course material.

This module builds multiple-choice, true/false and short-answer
questions from a subject's assignments and class materials using
frequency-based concept extraction, without any external model.
"""
from flask import Blueprint

quiz_bp = Blueprint('quiz', __name__, url_prefix='/quiz')

from academia.quiz import routes  # noqa: E402,F401
