"""
Ежедневные счетчики заездов и выездов.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class DailyCounter(BaseModel):
    """Количество заездов и выездов за один календарный день."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    check_ins: int = Field(0, ge=0)
    check_outs: int = Field(0, ge=0)

    def with_check_in(self) -> "DailyCounter":
        return self.model_copy(update={"check_ins": self.check_ins + 1})

    def with_check_out(self) -> "DailyCounter":
        return self.model_copy(update={"check_outs": self.check_outs + 1})
