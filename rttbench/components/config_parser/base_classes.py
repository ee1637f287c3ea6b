import logging
import os
from dataclasses import fields, is_dataclass
from typing import Optional

from ..logs import configure_logging

configure_logging()
logger = logging.getLogger(__name__)


class ExplicitParams:
    def __init__(self, data: Optional[dict] = None):
        if data is None:
            data = {}

        for f in fields(self):
            if f.name not in data:
                continue

            # nested dataclasses parse their own sub-dictionary
            setattr(self, f.name, f.type(data[f.name]))

    def as_dict(self):
        result = {}
        for f in fields(self):
            if not hasattr(self, f.name):
                continue

            v = getattr(self, f.name)

            if is_dataclass(v):
                result[f.name] = v.as_dict()
            else:
                result[f.name] = f.type(v)
        return result

    def set_attribute_from_env(self, attribute: str, env_var: str) -> bool:
        """
        Set the value of an attribute from an environment variable.
        """
        cls_name = self.__class__.__name__
        if not hasattr(self, attribute):
            raise AttributeError(f"{cls_name} has no attribute '{attribute}'")

        if value := os.getenv(env_var):
            field_type = {f.name: f.type for f in fields(self)}[attribute]
            setattr(self, attribute, field_type(value))
            logger.debug(f"{env_var} key loaded to {cls_name}.{attribute}")
            return True

        return False

    @classmethod
    def verify(cls, data: dict) -> bool:
        instance = cls(data)

        for field in fields(instance):
            if not hasattr(instance, field.name):
                raise KeyError(f"Missing required field: {field.name}")

            if is_dataclass(field.type):
                field.type.verify(data.get(field.name, {}))

        return True
