from rest_framework.decorators import api_view
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema
from .queries import StatsQueries
from .serializers import StatsResponseSerializer


@extend_schema(
    responses={200: StatsResponseSerializer},
    description="Aggregate statistics over all of the caller's drinks.",
    tags=['stats'],
)
@api_view(['GET'])
def user_stats(request):
    """Get journal statistics - thin HTTP handler."""
    data = StatsQueries.user_statistics(request.user.id)
    return Response(data)
