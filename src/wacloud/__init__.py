"""wacloud: cliente da WhatsApp Cloud API (Meta Graph API).

Uso:
    from wacloud import RequestContext, new_request, dispatch

    request = new_request(
        context=RequestContext(
            base_url="https://graph.facebook.com",
            name="send text",
            api_version="v24.0",
            sender_id=phone_number_id,
            endpoints=("messages",),
        ),
        bearer=access_token,
        payload=message,
    )
    response = await dispatch(http_client, request, MessageResponse)
"""

from wacloud.http import (
    GRAPH_API_BASE_URL,
    DispatchError,
    Hook,
    IncompleteRequestError,
    InvalidBaseURLError,
    PayloadEncodingError,
    Request,
    RequestBuilder,
    RequestContext,
    ResponseDecodeError,
    TransportError,
    UnexpectedStatusError,
    UnsupportedPayloadTypeError,
    URLCompositionError,
    compose_url,
    dispatch,
    extract_body,
    log_exchange,
    new_request,
)
from wacloud.messages import CloudApiClient, create_cloud_api_client
from wacloud.observability import get_request_name

__all__ = [
    "GRAPH_API_BASE_URL",
    "CloudApiClient",
    "DispatchError",
    "Hook",
    "IncompleteRequestError",
    "InvalidBaseURLError",
    "PayloadEncodingError",
    "Request",
    "RequestBuilder",
    "RequestContext",
    "ResponseDecodeError",
    "TransportError",
    "URLCompositionError",
    "UnexpectedStatusError",
    "UnsupportedPayloadTypeError",
    "compose_url",
    "create_cloud_api_client",
    "dispatch",
    "extract_body",
    "get_request_name",
    "log_exchange",
    "new_request",
]
