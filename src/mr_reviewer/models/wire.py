"""Response envelopes of the supported LLM APIs.

Only the fields the adapters read are modelled; everything else in the
provider's reply is ignored. List fields default to empty so a reply without
them reads the same as one with an empty list.
"""
from pydantic import BaseModel, Field


# Responses API (openai)

class ResponsesContent(BaseModel):
    type: str | None = None
    text: str = ""


class ResponsesOutputItem(BaseModel):
    type: str | None = None
    content: list[ResponsesContent] = Field(default_factory=list)


class ResponsesReply(BaseModel):
    output: list[ResponsesOutputItem] = Field(default_factory=list)


# Messages API (claude)

class MessagesContentBlock(BaseModel):
    type: str | None = None
    text: str = ""


class MessagesReply(BaseModel):
    content: list[MessagesContentBlock] = Field(default_factory=list)
    stop_reason: str | None = None


# Chat completions API (deepseek)

class ChatCompletionsMessage(BaseModel):
    role: str | None = None
    content: str | None = None


class ChatCompletionsChoice(BaseModel):
    message: ChatCompletionsMessage = Field(default_factory=ChatCompletionsMessage)
    finish_reason: str | None = None


class ChatCompletionsReply(BaseModel):
    choices: list[ChatCompletionsChoice] = Field(default_factory=list)


# Generate content API (gemini)

class GenerateContentPart(BaseModel):
    text: str = ""


class GenerateContentContent(BaseModel):
    parts: list[GenerateContentPart] = Field(default_factory=list)


class GenerateContentCandidate(BaseModel):
    content: GenerateContentContent = Field(default_factory=GenerateContentContent)


class GenerateContentReply(BaseModel):
    candidates: list[GenerateContentCandidate] = Field(default_factory=list)
