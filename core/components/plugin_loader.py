# core/components/plugin_loader.py
"""
Plugin loader for DCSim components.
Registers the built-in core.components modules and third-party plugins
published under the 'dcsim.components' entry point group.
"""
import importlib
import pkgutil
from importlib.metadata import entry_points
from typing import Any, Dict, Mapping, Optional, Type

from core.components.base import Component
from core.exceptions import DCSimError, ParameterError
from utils.logging_config import get_logger

logger = get_logger(__name__)

ENTRY_POINT_GROUP = "dcsim.components"


class ComponentFactory:
    """
    Factory for creating component instances by type name.
    """
    _registry: Dict[str, Type[Component]] = {}
    _loaded: bool = False

    @classmethod
    def load_plugins(cls) -> None:
        if cls._loaded:
            return
        cls._loaded = True

        import core.components as _builtin_pkg
        for _, module_name, _ in pkgutil.iter_modules(_builtin_pkg.__path__):
            if module_name in ("base", "plugin_loader"):
                continue
            importlib.import_module(f"core.components.{module_name}")

        for ep in entry_points(group=ENTRY_POINT_GROUP):
            try:
                comp_cls = ep.load()
                cls.register(comp_cls)
            except Exception as exc:
                logger.warning("Skipping component plugin '%s': %s", ep.name, exc)

    @classmethod
    def register(cls, comp_cls: Type[Component]) -> None:
        """
        Manually register a component class.
        The class must define a unique `type_name` attribute.
        """
        if not (isinstance(comp_cls, type) and issubclass(comp_cls, Component)):
            raise DCSimError(f"Cannot register non-Component class: {comp_cls}")
        type_name = getattr(comp_cls, "type_name", None)
        if not isinstance(type_name, str) or not type_name:
            raise DCSimError(f"Component class {comp_cls} lacks a valid `type_name` attribute.")
        cls._registry[type_name.lower()] = comp_cls

    @classmethod
    def types(cls):
        cls.load_plugins()
        return sorted(cls._registry)

    @classmethod
    def create(cls, type_name: str, comp_id: Optional[str], start_node: Any, end_node: Any,
               params: Optional[Mapping[str, Any]] = None) -> Component:
        """
        Instantiate a component by its type name (case-insensitive).
        Raises ParameterError for unknown types or bad parameters.
        """
        cls.load_plugins()
        comp_cls = cls._registry.get(str(type_name).lower())
        if comp_cls is None:
            raise ParameterError(f"Unknown component type: '{type_name}'")
        try:
            return comp_cls.from_params(comp_id, start_node, end_node, dict(params or {}))
        except ParameterError:
            raise
        except TypeError as exc:
            raise ParameterError(
                f"Error instantiating component '{comp_id}' of type '{type_name}': {exc}"
            ) from exc
