from rest_framework import status
from rest_framework.decorators import api_view, throttle_classes
from rest_framework.response import Response
from rest_framework.throttling import UserRateThrottle
from drf_spectacular.utils import extend_schema
from .serializers import (
    ParseInputSerializer,
    ParseResponseSerializer,
    RecommendationResponseSerializer,
    AIErrorSerializer,
)
from .services import (
    parse_drink_text,
    get_recommendation,
    AIServiceNotConfiguredError,
    UpstreamServiceError,
)


class AIRateThrottle(UserRateThrottle):
    """Tighter per-user budget for endpoints that call the LLM."""
    scope = 'ai'


def _ai_error(message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR):
    return Response({'success': False, 'error': message}, status=status_code)


@extend_schema(
    request=ParseInputSerializer,
    responses={
        200: ParseResponseSerializer,
        400: AIErrorSerializer,
        500: AIErrorSerializer,
    },
    description="Parse a natural-language drink description into a drink draft. Nothing is saved.",
    tags=['ai'],
)
@api_view(['POST'])
@throttle_classes([AIRateThrottle])
def parse_drink(request):
    """Parse free text into a drink draft - thin HTTP handler."""
    serializer = ParseInputSerializer(data=request.data)
    if not serializer.is_valid():
        messages = serializer.errors.get('text') or ['Text input is required']
        return _ai_error(str(messages[0]), status.HTTP_400_BAD_REQUEST)

    try:
        result = parse_drink_text(
            user_id=request.user.id,
            text=serializer.validated_data['text'],
        )
    except AIServiceNotConfiguredError as e:
        return _ai_error(str(e))
    except UpstreamServiceError:
        return _ai_error('Failed to parse input')

    return Response(result)


@extend_schema(
    responses={
        200: RecommendationResponseSerializer,
        500: AIErrorSerializer,
    },
    description="Suggest flavors and a drink to try next, based on the caller's history.",
    tags=['ai'],
)
@api_view(['POST'])
@throttle_classes([AIRateThrottle])
def recommendations(request):
    """Personalized recommendation - thin HTTP handler."""
    try:
        result = get_recommendation(user_id=request.user.id)
    except AIServiceNotConfiguredError as e:
        return _ai_error(str(e))
    except UpstreamServiceError:
        return _ai_error('Failed to generate recommendations')

    return Response(result)
