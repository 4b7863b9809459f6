import logging
import yaml
from string import Formatter
from typing import Dict, Any, List

from services.assessment_engine.models import AssessmentDefinition, SpecValidationError

logger = logging.getLogger(__name__)

MIN_RANKED_CATEGORIES = 3  # primary, secondary and tertiary slots
MIN_MATURITY_AREAS = 2
TITLE_FIELDS = ("primary", "secondary", "tertiary")


def _validate_title_template(definition: AssessmentDefinition) -> None:
    """The template may only reference the primary, secondary and tertiary titles."""
    template = definition.title_template
    try:
        field_names = [name for _, name, _, _ in Formatter().parse(template) if name is not None]
    except ValueError as e:
        raise SpecValidationError(f"Malformed title template in assessment '{definition.slug}': {e}")

    unknown = [name for name in field_names if name not in TITLE_FIELDS]
    if unknown:
        raise SpecValidationError(
            f"Title template in assessment '{definition.slug}' uses unknown fields {unknown}; "
            f"allowed: {list(TITLE_FIELDS)}"
        )

    # conversions and format specs only fail once applied
    try:
        template.format(**{field: field for field in TITLE_FIELDS})
    except (ValueError, TypeError) as e:
        raise SpecValidationError(f"Title template in assessment '{definition.slug}' cannot be formatted: {e}")


def _validate_definition(definition: AssessmentDefinition) -> None:
    _validate_title_template(definition)

    category_keys = set()
    for category in definition.categories:
        if category.key in category_keys:
            raise SpecValidationError(f"Duplicate category key '{category.key}' in assessment '{definition.slug}'")
        category_keys.add(category.key)

        if category.divisor <= 0:
            raise SpecValidationError(
                f"Category '{category.key}' in assessment '{definition.slug}' has a non-positive divisor: {category.divisor}"
            )

        question_ids = set()
        for question_id in category.question_ids:
            if question_id in question_ids:
                raise SpecValidationError(
                    f"Duplicate question ID '{question_id}' in category '{category.key}' (assessment '{definition.slug}')"
                )
            question_ids.add(question_id)

    for slot in ("primary", "secondary", "tertiary"):
        fallback_key = getattr(definition.fallbacks, slot)
        if fallback_key is not None and fallback_key not in category_keys:
            raise SpecValidationError(
                f"Fallback {slot} category '{fallback_key}' is not declared in assessment '{definition.slug}'"
            )

    if definition.kind == "ranked":
        if len(definition.categories) < MIN_RANKED_CATEGORIES:
            raise SpecValidationError(
                f"Ranked assessment '{definition.slug}' needs at least {MIN_RANKED_CATEGORIES} categories"
            )
        primary_fallback = definition.get_category(definition.fallbacks.primary)
        if primary_fallback is None or primary_fallback.narrative is None:
            raise SpecValidationError(
                f"Ranked assessment '{definition.slug}' needs a primary fallback category with a narrative"
            )
    else:
        if len(definition.categories) < MIN_MATURITY_AREAS:
            raise SpecValidationError(
                f"Maturity assessment '{definition.slug}' needs at least {MIN_MATURITY_AREAS} areas"
            )
        if not definition.maturity_levels:
            raise SpecValidationError(f"Maturity assessment '{definition.slug}' defines no maturity levels")


def load_assessment_definitions(data: List[Dict[str, Any]]) -> Dict[str, AssessmentDefinition]:
    """
    Validates raw definition dictionaries against the AssessmentDefinition model
    and performs additional custom validations.

    Returns an insertion-ordered mapping of slug -> definition.
    """
    if not isinstance(data, list):
        raise SpecValidationError("Assessment definitions must be a list of mappings")

    definitions: Dict[str, AssessmentDefinition] = {}
    for raw in data:
        # pydantic.ValidationError propagates for schema issues
        definition = AssessmentDefinition.model_validate(raw)
        if definition.slug in definitions:
            raise SpecValidationError(f"Duplicate assessment slug found: {definition.slug}")
        _validate_definition(definition)
        definitions[definition.slug] = definition

    logger.debug(f"Loaded {len(definitions)} assessment definitions: {list(definitions)}")
    return definitions


def load_assessment_definitions_from_file(file_path: str) -> Dict[str, AssessmentDefinition]:
    """
    Loads assessment definitions from a YAML file, validates them,
    and returns the slug -> definition mapping.

    The file may hold either a bare list of definitions or a mapping with an
    ``assessments`` key.
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise SpecValidationError(f"File not found: {file_path}")
    except yaml.YAMLError as e:
        raise SpecValidationError(f"Error parsing YAML file {file_path}: {e}")

    if data is None:
        raise SpecValidationError(f"YAML file is empty or invalid: {file_path}")

    if isinstance(data, dict):
        data = data.get("assessments")
        if data is None:
            raise SpecValidationError(f"YAML file {file_path} has no 'assessments' key")

    return load_assessment_definitions(data)
