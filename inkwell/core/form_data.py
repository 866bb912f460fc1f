"""Form Data - one typed value object per form, plus its wire payload.

Invariants:
    - Pure data: no IO, no validation (see core/validation.py)
    - to_payload() emits the camelCase body the admin endpoints accept
    - categories holds Category ids, never PostCategory join-row ids

Design Decisions:
    - Dataclasses over dicts: every variant of a form shares one shape,
      so controllers and validators cannot drift on field names
"""

from dataclasses import dataclass, field


@dataclass
class CategoryFormData:
    name: str = ""

    def to_payload(self) -> dict:
        return {"name": self.name}


@dataclass
class PostFormData:
    title: str = ""
    content: str = ""
    thumbnail_image_key: str | None = None
    categories: list[int] = field(default_factory=list)

    def to_payload(self) -> dict:
        return {
            "title": self.title,
            "content": self.content,
            "thumbnailImageKey": self.thumbnail_image_key,
            "categories": [{"id": category_id} for category_id in self.categories],
        }

    @classmethod
    def from_post(cls, post: dict) -> "PostFormData":
        """Build form values from a post as returned by the admin API."""
        return cls(
            title=post.get("title", ""),
            content=post.get("content", ""),
            thumbnail_image_key=post.get("thumbnailImageKey"),
            categories=[
                pc["category"]["id"] if pc.get("category") else pc["categoryId"]
                for pc in post.get("postCategories", [])
            ],
        )


@dataclass
class LegacyPostFormData:
    """Superseded post form that carried a literal thumbnail URL."""
    title: str = ""
    content: str = ""
    thumbnail_url: str = ""
    categories: list[int] = field(default_factory=list)


@dataclass
class ContactFormData:
    name: str = ""
    email: str = ""
    message: str = ""

    def to_payload(self) -> dict:
        return {"name": self.name, "email": self.email, "message": self.message}


@dataclass
class SignupFormData:
    email: str = ""
    password: str = ""
