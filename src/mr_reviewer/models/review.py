from pydantic import BaseModel, ConfigDict, Field, model_validator


class ReviewRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    description: str = ""
    author: str = ""
    diff: bytes = b""
    vars: dict[str, str] = Field(default_factory=dict)


class CommentThread(BaseModel):
    new_line: int | None = None
    old_line: int | None = None
    new_path: str | None = None
    old_path: str | None = None
    body: str

    @model_validator(mode="after")
    def check_paths(self):
        if not self.new_path and not self.old_path:
            raise ValueError("Either new_path or old_path required")
        return self

    @property
    def is_file_level(self) -> bool:
        return self.new_line is None and self.old_line is None


class ReviewResult(BaseModel):
    comment: str
    threads: list[CommentThread] | None = None
