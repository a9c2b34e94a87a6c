"""API 라우터 패키지 — 모든 리소스 엔드포인트 통합.

API Router package — Aggregates every resource router into ``api_router``,
mounted under ``/api`` by the application.

Included routers:
    - users: 사용자 (/users)
    - user_profiles: 사용자 프로필 (/user-profiles)
    - books: 도서 (/books)
    - book_sales: 도서 판매 (/book-sales)
    - book_interactions: 도서 상호작용 (/book-interactions)
    - reviews: 리뷰 (/reviews)
    - quotes: 인용구 (/quotes)
    - messages: 메시지 (/messages)
    - likes: 좋아요 (/likes)
    - repost_saves: 리포스트/저장 (/repost-saves)
    - follows: 팔로우 (/follows)
"""

from fastapi import APIRouter

from batubook.api.users import router as users_router
from batubook.api.user_profiles import router as user_profiles_router
from batubook.api.books import router as books_router
from batubook.api.book_sales import router as book_sales_router
from batubook.api.book_interactions import router as book_interactions_router
from batubook.api.reviews import router as reviews_router
from batubook.api.quotes import router as quotes_router
from batubook.api.messages import router as messages_router
from batubook.api.likes import router as likes_router
from batubook.api.repost_saves import router as repost_saves_router
from batubook.api.follows import router as follows_router

api_router: APIRouter = APIRouter()

api_router.include_router(users_router, prefix="/users", tags=["Users"])
api_router.include_router(user_profiles_router, prefix="/user-profiles", tags=["User Profiles"])
api_router.include_router(books_router, prefix="/books", tags=["Books"])
api_router.include_router(book_sales_router, prefix="/book-sales", tags=["Book Sales"])
api_router.include_router(book_interactions_router, prefix="/book-interactions", tags=["Book Interactions"])
api_router.include_router(reviews_router, prefix="/reviews", tags=["Reviews"])
api_router.include_router(quotes_router, prefix="/quotes", tags=["Quotes"])
api_router.include_router(messages_router, prefix="/messages", tags=["Messages"])
api_router.include_router(likes_router, prefix="/likes", tags=["Likes"])
api_router.include_router(repost_saves_router, prefix="/repost-saves", tags=["Repost Saves"])
api_router.include_router(follows_router, prefix="/follows", tags=["Follows"])
