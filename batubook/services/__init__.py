"""서비스 패키지 — 비즈니스 로직 계층.

Service package — Business logic layer.
Services enforce domain rules, call repositories for DB operations and
map ORM entities to response schemas; entities never leave this layer.
"""
