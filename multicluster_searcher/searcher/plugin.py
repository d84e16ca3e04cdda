"""
Loading of a searcher plugin from a directory.

A plugin is a Python file (settings.PLUGIN_FILE_NAME) exposing an init
function (settings.PLUGIN_INIT_FUNC) that takes an options dict and returns
a searcher:

    def searcher_plugin_init(options):
        return MySearcher()
"""

import importlib.util
import os
import sys
from typing import Any, Dict, Optional

from multicluster_searcher.common.config import settings
from multicluster_searcher.common.exception import PluginLoadError
from multicluster_searcher.common.logging import get_logger
from multicluster_searcher.searcher.searcher import Searcher

logger = get_logger(__name__)

PLUGIN_MODULE_PREFIX = "multicluster_searcher_plugin"


def load_plugin(plugin_dir: Optional[str], file_name: Optional[str] = None,
                init_func: Optional[str] = None) -> Searcher:
    """
    Load and validate the searcher plugin in plugin_dir.

    Raises:
        PluginLoadError: the plugin is missing, fails to import or initialise,
            or does not return a searcher
    """
    file_name = file_name or settings.PLUGIN_FILE_NAME
    init_func = init_func or settings.PLUGIN_INIT_FUNC

    if not plugin_dir:
        raise PluginLoadError("no plugin directory configured")

    if not os.path.isdir(plugin_dir):
        raise PluginLoadError(f"plugin directory {plugin_dir} does not exist")

    path = os.path.join(plugin_dir, file_name)
    if not os.path.isfile(path):
        raise PluginLoadError(f"plugin file {path} does not exist")

    module_name = f"{PLUGIN_MODULE_PREFIX}.{os.path.splitext(file_name)[0]}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise PluginLoadError(f"cannot import plugin file {path}")

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        sys.modules.pop(module_name, None)
        raise PluginLoadError(f"import plugin {path} failed: {e}") from e

    init = getattr(module, init_func, None)
    if not callable(init):
        raise PluginLoadError(f"plugin {path} has no callable {init_func}")

    options: Dict[str, Any] = {"plugin_dir": plugin_dir}
    try:
        searcher = init(options)
    except Exception as e:
        raise PluginLoadError(f"plugin {path} {init_func} failed: {e}") from e

    if not _is_searcher(searcher):
        raise PluginLoadError(f"plugin {path} returned {type(searcher).__name__}, not a searcher")

    logger.info(f"Loaded searcher plugin {path}")
    return searcher


def _is_searcher(obj: Any) -> bool:
    if isinstance(obj, Searcher):
        return True

    return callable(getattr(obj, "find_scheduler_clusters", None))
