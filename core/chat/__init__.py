from core.chat.view_builder import ChatViewBuilder

__all__: list[str] = ["ChatViewBuilder"]
