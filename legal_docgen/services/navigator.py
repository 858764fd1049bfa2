"""Question navigation and progress over a template questionnaire"""

from typing import Optional

from legal_docgen.models.answer import Answers
from legal_docgen.models.template import DocumentTemplate, Question
from legal_docgen.services.renderer import is_empty, is_truthy


def eligibility(template: DocumentTemplate, answers: Answers) -> dict[str, bool]:
    """
    Map each question id to whether it can currently be asked.

    A question with depends_on is eligible only when its parent is eligible
    and the parent's answer is truthy, so a switched-off branch hides every
    question below it. Parents always come earlier in the list.
    """
    eligible: dict[str, bool] = {}
    for question in template.questions:
        if question.depends_on is None:
            eligible[question.id] = True
        else:
            eligible[question.id] = (
                eligible.get(question.depends_on, False)
                and is_truthy(answers.get(question.depends_on))
            )
    return eligible


def eligible_questions(template: DocumentTemplate, answers: Answers) -> list[Question]:
    """Currently eligible questions, answered or not, in declaration order"""
    eligible = eligibility(template, answers)
    return [q for q in template.questions if eligible[q.id]]


def next_question(template: DocumentTemplate, answers: Answers) -> Optional[Question]:
    """
    First eligible question without an answer, or None when the flow is done.

    A key present in answers counts as answered even when its value is blank,
    which is how an optional question gets skipped.
    """
    for question in eligible_questions(template, answers):
        if question.id in answers:
            continue
        return question
    return None


def completion_rate(template: DocumentTemplate, answers: Answers) -> int:
    """Percentage (0-100) of eligible questions holding a non-empty answer"""
    questions = eligible_questions(template, answers)
    if not questions:
        return 0
    answered = sum(1 for q in questions if not is_empty(answers.get(q.id)))
    total = len(questions)
    # Half-up rounding in integers: 12.5 -> 13
    return (200 * answered + total) // (2 * total)
