from .news import NewsArticle
from .events import Event
from .quick_links import QuickLink
from .contact_info import ContactInfo
