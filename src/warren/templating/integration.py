"""The kida environment every document and layout renders through.

The loader is rooted at ``app_dir`` itself, so a template name is the
file's path in the route table, groups included
(``(shop)/products/layout.html``).
"""

from collections.abc import Callable, Mapping
from typing import Any

from kida import Environment, FileSystemLoader

from warren.config import AppConfig


def create_environment(
    config: AppConfig,
    filters: Mapping[str, Callable[..., Any]],
    globals_: Mapping[str, Any],
) -> Environment:
    """Build the environment once, when the app freezes.

    In debug mode kida re-reads changed templates, in step with the
    route table being rescanned on each request.
    """
    kida_env = Environment(
        loader=FileSystemLoader(str(config.app_dir)),
        auto_reload=config.debug,
        autoescape=config.autoescape,
        lstrip_blocks=config.lstrip_blocks,
        trim_blocks=config.trim_blocks,
    )
    if filters:
        kida_env.update_filters(dict(filters))
    for global_name in globals_:
        kida_env.add_global(global_name, globals_[global_name])
    return kida_env
