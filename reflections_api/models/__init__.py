from reflections_api.models.api_key import ApiKey
from reflections_api.models.blog import Blog, BlogImage
from reflections_api.models.book import Book
from reflections_api.models.comment import Comment
from reflections_api.models.event import Event
from reflections_api.models.form import Form

__all__ = [
    "ApiKey",
    "Blog",
    "BlogImage",
    "Book",
    "Comment",
    "Event",
    "Form",
]
