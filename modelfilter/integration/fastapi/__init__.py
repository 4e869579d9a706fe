from .filter_intent import filter_intent, filter_intent_dependency
