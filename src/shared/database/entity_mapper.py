from typing import Any, Callable, Dict, Type


class EntityMapper:
    """Dispatches domain models to the mapper registered for their type."""

    def __init__(self, entity_mappings: Dict[Type, Callable[[Any], Any]]):
        self.entity_mappings = entity_mappings

    def map_to_entity(self, model_instance: Any):
        model_type = type(model_instance)
        mapping = self.entity_mappings.get(model_type)
        if mapping is None:
            registered = ", ".join(sorted(t.__name__ for t in self.entity_mappings))
            raise ValueError(
                f"No entity mapping found for model type: {model_type.__name__} (registered: {registered})"
            )
        return mapping(model_instance)
