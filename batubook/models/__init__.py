"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package. Importing from this package registers every
model with the metadata, which Alembic and ``create_all`` rely on.

Modules:
    enums: 도메인 열거형 (Role, Gender, Genre, Currency, MessageType, ActionType)
    user: 사용자 및 프로필 (User and UserProfile)
    book: 도서, 판매, 상호작용 (Book, BookSales, BookInteraction)
    content: 리뷰 및 인용구 (Review and Quote)
    message: 메시지 (Message)
    social: 팔로우, 좋아요, 리포스트/저장 (Follow, Like, RepostSave)
"""

from batubook.models.user import User, UserProfile
from batubook.models.book import Book, BookSales, BookInteraction
from batubook.models.content import Review, Quote
from batubook.models.message import Message
from batubook.models.social import Follow, Like, RepostSave

__all__ = [
    "User", "UserProfile",
    "Book", "BookSales", "BookInteraction",
    "Review", "Quote",
    "Message",
    "Follow", "Like", "RepostSave",
]
