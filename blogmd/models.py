from pydantic import BaseModel


class ItemOutcome(BaseModel):
    index: int
    title: str
    path: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class BatchReport(BaseModel):
    written: int = 0
    failed: int = 0
    outcomes: list[ItemOutcome] = []
    duration: float = 0.0
