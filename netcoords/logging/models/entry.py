from typing import Any, Dict

import msgspec

from .log_level import LogLevel


class Entry(msgspec.Struct, kw_only=True):
    message: str | None = None
    tags: set[str] = msgspec.field(
        default_factory=set,
    )
    level: LogLevel

    def to_template(
        self,
        template: str,
        context: Dict[str, Any] | None = None,
    ) -> str:
        values: Dict[str, Any] = {
            field: getattr(self, field) for field in self.__struct_fields__
        }
        values["level"] = self.level.value

        if context:
            values.update(context)

        return template.format(**values)
