from sort_trace.web.api.router import router

__all__ = ["router"]
