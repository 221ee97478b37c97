"""
Pydantic models for check-in records.

Normalises raw MongoDB documents into a single record shape consumed by
the analytics services.
"""

from datetime import datetime
from typing import Optional, List, Dict, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CheckInRecord(BaseModel):
    """
    A single check-in as seen by the analytics.

    Symptom values are kept as stored. Producers write
    ``{"severity": 1-10, "location"?, "notes"?}`` dicts; analytics skip any
    value without a numeric severity.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    userId: str
    timestamp: datetime
    symptoms: Dict[str, Any] = Field(default_factory=dict)
    activities: List[str] = Field(default_factory=list)
    triggers: List[str] = Field(default_factory=list)
    notes: str = ""
    flaggedForDoctor: bool = False
    rawTranscript: Optional[str] = None

    @field_validator("symptoms", mode="before")
    @classmethod
    def _symptoms_or_empty(cls, value: Any) -> Dict[str, Any]:
        if not isinstance(value, dict):
            return {}
        return {str(name): v for name, v in value.items()}

    @field_validator("activities", "triggers", mode="before")
    @classmethod
    def _tokens_or_empty(cls, value: Any) -> List[str]:
        if not isinstance(value, (list, tuple, set)):
            return []
        tokens = [v.strip() for v in value if isinstance(v, str) and v.strip()]
        return list(dict.fromkeys(tokens))

    @field_validator("notes", mode="before")
    @classmethod
    def _notes_or_empty(cls, value: Any) -> str:
        return value if isinstance(value, str) else ""

    @field_validator("flaggedForDoctor", mode="before")
    @classmethod
    def _flag_or_false(cls, value: Any) -> bool:
        return bool(value)

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "CheckInRecord":
        """
        Build a record from a stored check-in document.

        Args:
            doc: MongoDB document. Symptoms, activities, triggers and notes
                may live under a ``structured`` block or at the top level;
                either may be missing or null.

        Returns:
            Normalised CheckInRecord
        """
        structured = doc.get("structured") or {}

        def pick(field: str) -> Any:
            if field in structured:
                return structured.get(field)
            return doc.get(field)

        return cls(
            id=str(doc.get("_id", doc.get("id", ""))),
            userId=str(doc.get("userId", "")),
            timestamp=doc["timestamp"],
            symptoms=pick("symptoms"),
            activities=pick("activities"),
            triggers=pick("triggers"),
            notes=pick("notes"),
            flaggedForDoctor=doc.get("flaggedForDoctor", False),
            rawTranscript=doc.get("rawTranscript"),
        )

    def symptom_items(self) -> List[tuple]:
        """Symptom (name, value) pairs in stored order."""
        return list(self.symptoms.items())
