"""Context key (space/project) resolution from request parameters."""

from collections.abc import Callable, Iterable, Mapping

SPACE_KEY_PARAM = "spaceKey"
PROJECT_KEY_PARAM = "projectKey"
CONTEXT_KEY_PARAMS = (SPACE_KEY_PARAM, PROJECT_KEY_PARAM)
UNKNOWN_CONTEXT_KEY = "Unknown"

Extractor = Callable[[Mapping[str, str]], str | None]


def param_extractor(name: str) -> Extractor:
    """Build an extractor returning the trimmed parameter, or None if absent or blank."""

    def extract(params: Mapping[str, str]) -> str | None:
        value = params.get(name)
        if value is None:
            return None
        value = value.strip()
        return value or None

    return extract


def resolve_context_key(
    params: Mapping[str, str],
    candidates: Iterable[str] = CONTEXT_KEY_PARAMS,
    default: str = UNKNOWN_CONTEXT_KEY,
) -> str:
    """Resolve the context key from the first usable candidate parameter.

    Candidates are tried in order (``spaceKey`` before ``projectKey`` by
    default). The trimmed value is returned so incidental whitespace never
    reaches rendered output.

    Args:
        params: Request query parameters
        candidates: Parameter names, highest precedence first
        default: Value used when no candidate is present and non-blank

    Returns:
        The resolved context key
    """
    for extract in map(param_extractor, candidates):
        value = extract(params)
        if value is not None:
            return value
    return default
