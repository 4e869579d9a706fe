from typing import Optional

import fastapi

from modelfilter.engine.settings import FilterSettings
from modelfilter.intent import FilterIntent, parse_request_params


def filter_intent_dependency(settings: Optional[FilterSettings] = None):
    """ Make a FastAPI dependency that gets the Filter Intent from the request parameters

    Example:
        settings = FilterSettings(limit_key='limit', offset_key='offset')
        get_filter_intent = filter_intent_dependency(settings)

        @app.get('/api/users')
        def list_users(intent: FilterIntent = Depends(get_filter_intent)):
            ...
    """
    def filter_intent(request: fastapi.Request) -> FilterIntent:
        """ Get the Filter Intent from the request parameters

        Example:
            /api/users?_order=-age&_limit=10&name=alice,carol
        """
        return parse_request_params(request.query_params, settings)

    return filter_intent


# The dependency with default settings
filter_intent = filter_intent_dependency()
