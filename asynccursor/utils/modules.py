import logging
from importlib import import_module


### Driver Loading
def module_exists(module_name: str, classpath: str):
    """Returns the class `module_name` of the module at `classpath`."""
    try:
        module = import_module(classpath)
    except ImportError as e:
        logging.exception(
            f"No Driver for provider {module_name} was found: {e}"
        )
        raise ImportError(
            f"No Provider {module_name} Found"
        ) from e
    try:
        return getattr(module, module_name)
    except AttributeError as e:
        raise ImportError(
            f"Module {classpath} has no driver {module_name}"
        ) from e
