import asyncio
import re


def create_slug(text: str) -> str:
    """Generates a URL-friendly slug from text.

    Lowercases, drops everything but letters, digits, whitespace and
    hyphens, then collapses whitespace and hyphen runs into single hyphens.
    """
    slug = text.lower().strip()
    slug = re.sub(r'[^a-z0-9\s-]', '', slug)
    slug = re.sub(r'\s+', '-', slug)
    slug = re.sub(r'-+', '-', slug)
    return slug.strip('-')


def create_store_username(store_name: str) -> str:
    """Generates a store username exactly as entered, minus anything
    that is not a lowercase letter or digit.
    """
    username = re.sub(r'[^a-z0-9]', '', store_name.lower().strip())
    return username[:50]


def to_thread(fn):
    async def wrapper(*args, **kwargs):
        return await asyncio.to_thread(fn, *args, **kwargs)

    wrapper._sync_fn = fn

    return wrapper
