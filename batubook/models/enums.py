"""도메인 열거형 정의.

Domain enumerations shared by models and schemas.
Every enum serializes to its lowercase member name and parses leniently
(case-insensitive, ``-`` or space accepted as ``_``, Turkish dotted and
dotless i folded to ASCII ``i``). Columns store the upper-case member name.
"""

from enum import Enum


class LowercaseEnum(str, Enum):
    """소문자 값을 가지며 관대하게 파싱되는 문자열 열거형.

    String enum whose values are the lowercase member names.
    ``_missing_`` normalizes user input before the member lookup, so
    ``"SCIENCE-FICTION"``, ``"Scıence fıctıon"`` and ``"science_fiction"``
    resolve to the same member.
    """

    @staticmethod
    def normalize(value: str) -> str:
        """입력 문자열을 멤버 값 형식으로 정규화합니다.

        Normalize raw input into the member value format.
        """
        folded = value.strip().replace("İ", "I").replace("ı", "i").lower()
        return folded.replace("-", "_").replace(" ", "_")

    @classmethod
    def _missing_(cls, value: object) -> "LowercaseEnum | None":
        if not isinstance(value, str):
            return None
        normalized = cls.normalize(value)
        for member in cls:
            if member.value == normalized:
                return member
        return None


class Role(LowercaseEnum):
    USER = "user"
    ADMIN = "admin"


class Gender(LowercaseEnum):
    MALE = "male"
    FEMALE = "female"
    UNDISCLOSED = "undisclosed"


class Genre(LowercaseEnum):
    NOVEL = "novel"
    ADVENTURE = "adventure"
    SCIENCE_FICTION = "science_fiction"
    FANTASY = "fantasy"
    HORROR = "horror"
    THRILLER = "thriller"
    CRIME = "crime"
    DYSTOPIA = "dystopia"
    ROMANCE = "romance"


class Currency(LowercaseEnum):
    TRY = "try"
    USD = "usd"
    EUR = "eur"


class MessageType(LowercaseEnum):
    """메시지 유형 — 어떤 연관 필드가 채워지는지 결정합니다.

    Message discriminator; selects which association field is populated.
    """

    PERSONAL = "personal"
    BOOK = "book"
    REVIEW = "review"
    QUOTE = "quote"


class ActionType(LowercaseEnum):
    REPOST = "repost"
    SAVE = "save"
