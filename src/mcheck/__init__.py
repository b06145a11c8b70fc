from .version import Version, parse_version, compare_versions, is_valid_version
from .component import Component
from .config import Config
from .requirement import Requirement, Checker, CheckResult

__all__ = [
    'Version',
    'parse_version',
    'compare_versions',
    'is_valid_version',
    'Component',
    'Config',
    'Requirement',
    'Checker',
    'CheckResult',
]
