"""Runtime parameter registry primitives."""

from .generic_param import (
    BoolParam,
    ChoiceParam,
    FloatParam,
    GenericParam,
    IntParam,
    SpecializedParam,
    StringParam,
)
from .overrides import (
    apply_overrides,
    flatten_namespaces,
    load_overrides_file,
    parse_override_tokens,
)
from .param_set import NAMESPACE_SEPARATOR, ParamSet

__all__ = [
    "NAMESPACE_SEPARATOR",
    "BoolParam",
    "ChoiceParam",
    "FloatParam",
    "GenericParam",
    "IntParam",
    "ParamSet",
    "SpecializedParam",
    "StringParam",
    "apply_overrides",
    "flatten_namespaces",
    "load_overrides_file",
    "parse_override_tokens",
]
