"""
Modelos ORM de VitaSpoon.

Solo existe la tabla de recetas guardadas. La receta completa se guarda
como JSON (`payload_json`); las columnas sueltas sirven para listar y
filtrar sin deserializar.
"""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .database import Base


def _uuid() -> str:
    return str(uuid.uuid4())


class SavedRecipe(Base):
    __tablename__ = "saved_recipes"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid)
    title: Mapped[str] = mapped_column(String(300))
    cuisine_type: Mapped[str] = mapped_column(String(50), default="", index=True)
    diet_type: Mapped[str] = mapped_column(String(50), default="")
    source: Mapped[str] = mapped_column(String(30), default="")  # "openai" | "gemini" | "openrouter" | "local" | "csv_database"

    # Receta completa serializada (Recipe.to_dict)
    payload_json: Mapped[str] = mapped_column(Text, default="{}")

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
