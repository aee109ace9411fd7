from .latched import MessageBus, Publisher, Subscription, default_bus

__all__ = ["MessageBus", "Publisher", "Subscription", "default_bus"]
