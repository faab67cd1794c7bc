"""Rendering of deployment parameter templates."""

from deisrel.params.domain.value_objects import E2EParams

E2E_PARAMS_TEMPLATE = """[e2e]
org = "{org}"
dockerTag = "{tag}"
pullPolicy = "{pull_policy}"
"""


def render_e2e_params(params: E2EParams) -> str:
    """
    Render the e2e parameters block.

    Fields are substituted verbatim, without escaping.

    Args:
        params: Values to substitute

    Returns:
        The rendered block, ending with a newline
    """
    return E2E_PARAMS_TEMPLATE.format(
        org=params.org,
        tag=params.tag,
        pull_policy=params.pull_policy.value,
    )
