# visadesk/engine/__init__.py
from .errors import ConfigurationError, UnknownSchemeError, ValidationError, VisaEngineError
from .evaluator import EVALUATORS, evaluate, scheme_catalogue
from .reference import REFERENCE_SCHEDULES, ReferenceConstants, get_reference_constants
from .results import EligibilityResult, ScoreResult
