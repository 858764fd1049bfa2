"""Template registry - the immutable set of known document templates"""

import json
import logging
import re
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Optional

from pydantic import ValidationError

from legal_docgen.models.template import DocumentSummary, DocumentTemplate, QuestionType
from legal_docgen.services.french_templates import FRENCH_LEGAL_TEMPLATES
from legal_docgen.utils.config import Settings, get_settings

logger = logging.getLogger(__name__)

# Field names referenced by a body: {{field}}, {{#field}}, {{^field}}, {{#eq field "v"}}
BODY_FIELD_RE = re.compile(r'\{\{\s*[#^]?\s*(?:(?:eq|ne)\s+)?(\w+)')


def check_template(template: DocumentTemplate) -> list[str]:
    """
    Authoring problems in a template (empty list when sound).

    - question ids are unique
    - depends_on names an earlier question
    - required/optional fields are question ids
    - select questions have options
    - validation patterns compile
    - every body token names a question
    """
    problems = []
    seen: set[str] = set()

    for question in template.questions:
        if question.id in seen:
            problems.append(f"duplicate question id '{question.id}'")
        if question.depends_on is not None and question.depends_on not in seen:
            problems.append(
                f"question '{question.id}' depends on '{question.depends_on}', "
                "which is not an earlier question"
            )
        if question.type == QuestionType.SELECT and not question.options:
            problems.append(f"select question '{question.id}' has no options")
        if question.validation and question.validation.pattern:
            try:
                re.compile(question.validation.pattern)
            except re.error as e:
                problems.append(f"invalid pattern for '{question.id}': {e}")
        seen.add(question.id)

    for field_id in template.required_fields:
        if field_id not in seen:
            problems.append(f"required field '{field_id}' is not a question")
    for field_id in template.optional_fields:
        if field_id not in seen:
            problems.append(f"optional field '{field_id}' is not a question")

    for token in body_fields(template.document_body):
        if token not in seen:
            problems.append(f"body references unknown field '{token}'")

    return problems


def body_fields(body: str) -> list[str]:
    """Distinct field names used in a body, in first-seen order"""
    fields: list[str] = []
    for match in BODY_FIELD_RE.finditer(body):
        if match.group(1) not in fields:
            fields.append(match.group(1))
    return fields


class TemplateRegistry:
    """Immutable set of document templates keyed by id, in registration order"""

    def __init__(self, templates: Iterable[DocumentTemplate]):
        by_id: dict[str, DocumentTemplate] = {}
        for template in templates:
            if template.id in by_id:
                raise ValueError(f"Duplicate template id: {template.id}")
            by_id[template.id] = template
        self._templates = MappingProxyType(by_id)

    def __len__(self) -> int:
        return len(self._templates)

    def __contains__(self, template_id: str) -> bool:
        return template_id in self._templates

    def __iter__(self):
        return iter(self._templates.values())

    def get_available_documents(self) -> list[DocumentSummary]:
        """Summaries of all templates, in registration order"""
        return [t.summary() for t in self._templates.values()]

    def get_template(self, template_id: str) -> Optional[DocumentTemplate]:
        """Get a template by id, or None when unknown"""
        return self._templates.get(template_id)


def load_builtin_templates() -> list[DocumentTemplate]:
    """The French templates shipped with the package"""
    return [DocumentTemplate.model_validate(data) for data in FRENCH_LEGAL_TEMPLATES]


def load_templates_from_dir(templates_dir: str) -> list[DocumentTemplate]:
    """
    Load extra templates from *.json files, sorted by file name.

    Unreadable or unsound files are logged and skipped.
    """
    directory = Path(templates_dir)
    if not directory.is_dir():
        logger.warning(f"Templates directory not found: {directory}")
        return []

    templates = []
    for template_file in sorted(directory.glob("*.json")):
        try:
            with open(template_file, 'r', encoding='utf-8') as f:
                template = DocumentTemplate.model_validate(json.load(f))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
            logger.warning(f"Error loading template {template_file}: {e}")
            continue

        problems = check_template(template)
        if problems:
            logger.warning(f"Skipping template {template_file}: {'; '.join(problems)}")
            continue

        templates.append(template)
        logger.info(f"Loaded template '{template.id}' from {template_file.name}")
    return templates


def build_default_registry(settings: Optional[Settings] = None) -> TemplateRegistry:
    """Registry of the built-in templates plus any configured JSON templates"""
    settings = settings or get_settings()
    templates = load_builtin_templates()
    if settings.templates_dir:
        known = {t.id for t in templates}
        for template in load_templates_from_dir(settings.templates_dir):
            if template.id in known:
                logger.warning(f"Template '{template.id}' already registered, ignoring file copy")
                continue
            known.add(template.id)
            templates.append(template)
    return TemplateRegistry(templates)
