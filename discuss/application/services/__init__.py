from discuss.application.services.slug_allocator import SlugAllocator

__all__ = ["SlugAllocator"]
