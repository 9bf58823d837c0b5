import re

from pydantic import BaseModel

_PLACEHOLDER_RE = re.compile(r"\{\{\s*(\w+)\s*\}\}")


class Prompt(BaseModel):
    name: str
    version: str
    description: str
    inputs: dict[str, str]
    template: str

    class Config:
        extra = "forbid"

    def render(self, **values: str) -> str:
        """Fill `{{ name }}` placeholders; every declared input is required."""
        unknown = set(values) - set(self.inputs)
        if unknown:
            raise ValueError(
                f"Unknown inputs for prompt '{self.name}': {sorted(unknown)}"
            )
        missing = set(self.inputs) - set(values)
        if missing:
            raise ValueError(
                f"Missing inputs for prompt '{self.name}': {sorted(missing)}"
            )

        return _PLACEHOLDER_RE.sub(lambda m: values[m.group(1)], self.template)
