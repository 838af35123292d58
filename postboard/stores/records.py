"""Record store for users and posts.

Handles:
- Repository interfaces (UserRepository, PostRepository)
- Volatile in-memory implementations, one lock per collection

All operations are synchronous and never suspend. Uniqueness of non-empty
email/phone is checked and enforced under the users lock, so two racing
registrations cannot both be stored.
"""

from abc import ABC, abstractmethod
import dataclasses
import threading

from postboard.errors import ConflictError
from postboard.models import Post, User


class UserRepository(ABC):
    """Storage interface for User records."""

    @abstractmethod
    def store_user(self, user: User) -> None:
        """Insert a user.

        Raises:
            ConflictError: If another user holds the same non-empty email or phone.
        """

    @abstractmethod
    def retrieve_user_by_id(self, user_id: str) -> User | None: ...

    @abstractmethod
    def retrieve_user_by_email(self, email: str) -> User | None: ...

    @abstractmethod
    def retrieve_user_by_phone(self, phone: str) -> User | None: ...


class PostRepository(ABC):
    """Storage interface for Post records."""

    @abstractmethod
    def store_post(self, post: Post) -> None:
        """Insert a post. No-op if an identical post is already stored."""

    @abstractmethod
    def retrieve_post_by_id(self, post_id: str) -> Post | None: ...

    @abstractmethod
    def retrieve_posts_by_user_id(self, author_id: str) -> list[Post]:
        """All posts by author_id, in insertion order."""

    @abstractmethod
    def update_post_content(self, post_id: str, content: str) -> Post | None:
        """Replace a post's content.

        Returns:
            The updated post, or None if no post has that id.
        """

    @abstractmethod
    def delete_post_by_id(self, post_id: str) -> None:
        """Remove every post with post_id. No-op if none match."""


class InMemoryUserRepository(UserRepository):
    """Users held in a process-wide list."""

    def __init__(self) -> None:
        self._users: list[User] = []
        self._lock = threading.Lock()

    def store_user(self, user: User) -> None:
        with self._lock:
            if user.email and self._find(lambda u: u.email == user.email):
                raise ConflictError("Email already registered", field="email")
            if user.phone and self._find(lambda u: u.phone == user.phone):
                raise ConflictError("Phone number already registered", field="phone")
            self._users.append(user)

    def retrieve_user_by_id(self, user_id: str) -> User | None:
        with self._lock:
            return self._find(lambda u: u.id == user_id)

    def retrieve_user_by_email(self, email: str) -> User | None:
        if not email:
            return None
        with self._lock:
            return self._find(lambda u: u.email == email)

    def retrieve_user_by_phone(self, phone: str) -> User | None:
        if not phone:
            return None
        with self._lock:
            return self._find(lambda u: u.phone == phone)

    def clear(self) -> None:
        with self._lock:
            self._users.clear()

    def _find(self, predicate) -> User | None:
        # Caller holds the lock.
        return next((u for u in self._users if predicate(u)), None)


class InMemoryPostRepository(PostRepository):
    """Posts held in a process-wide list, in insertion order."""

    def __init__(self) -> None:
        self._posts: list[Post] = []
        self._lock = threading.Lock()

    def store_post(self, post: Post) -> None:
        with self._lock:
            if post not in self._posts:
                self._posts.append(post)

    def retrieve_post_by_id(self, post_id: str) -> Post | None:
        with self._lock:
            return next((p for p in self._posts if p.id == post_id), None)

    def retrieve_posts_by_user_id(self, author_id: str) -> list[Post]:
        with self._lock:
            return [p for p in self._posts if p.author_id == author_id]

    def update_post_content(self, post_id: str, content: str) -> Post | None:
        updated: Post | None = None
        with self._lock:
            for i, post in enumerate(self._posts):
                if post.id == post_id:
                    updated = dataclasses.replace(post, content=content)
                    self._posts[i] = updated
        return updated

    def delete_post_by_id(self, post_id: str) -> None:
        with self._lock:
            self._posts = [p for p in self._posts if p.id != post_id]

    def clear(self) -> None:
        with self._lock:
            self._posts.clear()
