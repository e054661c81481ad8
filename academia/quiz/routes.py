"""
Routes for quiz draft generation.

Teachers request a draft for a subject and review it before saving.
"""
from flask import jsonify, request, current_app

from academia.quiz import quiz_bp
from academia.quiz.errors import QuizGenerationError, SubjectNotFoundError
from academia.quiz.questions import redact_answers
from academia.quiz.service import QuizGeneratorService


def _flag(value, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() not in ('0', 'false', 'no', 'off')


@quiz_bp.route('/api/subjects/<int:subject_id>/draft', methods=['POST'])
def generate_quiz_draft(subject_id):
    """
    Generate a draft quiz for a subject (does not save anything).

    Request body (optional):
    {
        "include_answers": true  // false strips correctAnswer from every question
    }
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    include_answers = _flag(request.args.get('include_answers', data.get('include_answers')), True)

    try:
        questions = QuizGeneratorService().generate_quiz_draft(subject_id)

        if include_answers:
            questions_data = [question.to_dict() for question in questions]
        else:
            questions_data = redact_answers(questions)

        return jsonify({
            'success': True,
            'subject_id': subject_id,
            'questions': questions_data
        }), 200

    except SubjectNotFoundError as e:
        return jsonify({'success': False, 'error': e.message}), 404
    except QuizGenerationError as e:
        current_app.logger.error(f"Quiz generation failed for subject {subject_id}: {str(e)}")
        return jsonify({'success': False, 'error': str(e)}), 500
    except Exception as e:
        current_app.logger.exception(f"Error generating quiz draft for subject {subject_id}: {str(e)}")
        return jsonify({'success': False, 'error': 'Failed to generate quiz draft'}), 500
