"""Document model: typed blocks and styled inline runs produced by the parser"""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class InlineStyle(str, Enum):
    """Restrict inline runs to the styles the tokenizer can emit"""
    plain = "plain"
    bold = "bold"
    italic = "italic"
    code = "code"


class InlineRun(BaseModel):
    """One contiguous styled span of text within a block."""
    model_config = ConfigDict(frozen=True)

    text: str
    style: InlineStyle = InlineStyle.plain


class Heading(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["heading"] = "heading"
    level: int = Field(..., ge=1, le=3, description="Number of leading hashes")
    runs: tuple[InlineRun, ...] = ()


class BulletItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["bullet"] = "bullet"
    depth: int = Field(default=0, ge=0, description="Leading spaces // 2; a presentation hint only")
    runs: tuple[InlineRun, ...] = ()


class NumberedItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["numbered"] = "numbered"
    number: int
    runs: tuple[InlineRun, ...] = ()


class Paragraph(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["paragraph"] = "paragraph"
    runs: tuple[InlineRun, ...] = ()


class CodeBlock(BaseModel):
    """Fenced code, kept verbatim and never tokenized."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["code"] = "code"
    raw: str = ""


class Blockquote(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["quote"] = "quote"
    runs: tuple[InlineRun, ...] = ()


class Divider(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["divider"] = "divider"


class BlankMarker(BaseModel):
    """One collapsed run of consecutive empty lines."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["blank"] = "blank"


Block = Annotated[
    Union[Heading, BulletItem, NumberedItem, Paragraph, CodeBlock, Blockquote, Divider, BlankMarker],
    Field(discriminator="kind"),
]

# Blocks whose payload goes through the inline tokenizer
RUN_BLOCKS = (Heading, BulletItem, NumberedItem, Paragraph, Blockquote)


class Document(BaseModel):
    """Result of a single parse call; rebuilt from scratch on every update."""
    model_config = ConfigDict(frozen=True)

    blocks: tuple[Block, ...] = ()

    def kinds(self) -> list[str]:
        """Return the block kind tags in document order."""
        return [b.kind for b in self.blocks]


def runs_text(runs: tuple[InlineRun, ...]) -> str:
    """Concatenate run texts with all styling dropped."""
    return "".join(r.text for r in runs)
