from __future__ import annotations
from datetime import datetime
from typing import Optional

from sqlalchemy import Column
from sqlalchemy.types import DateTime, Text
from sqlmodel import SQLModel, Field

class SQLModelBase(SQLModel):
    pass

class DocumentRow(SQLModelBase, table=True):
    __tablename__ = "documents"

    id: str = Field(primary_key=True)

    title: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    content: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))

    # author is flattened; has_author keeps Author(id=None, name=None) distinct from no author
    has_author: bool = Field(default=False, nullable=False)
    author_id: Optional[str] = Field(default=None, index=True)
    author_name: Optional[str] = Field(default=None)

    created: Optional[datetime] = Field(default=None, sa_column=Column(DateTime(timezone=True), nullable=True))
