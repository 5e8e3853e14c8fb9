import pytest
from django.urls import reverse
from rest_framework import status

from .conftest import api_timeout, tool_response


@pytest.mark.django_db
class TestParseEndpoint:

    url = reverse('ai:ai-parse')

    def test_requires_auth(self, api_client, llm):
        response = api_client.post(self.url, {'text': 'latte'}, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        llm.assert_not_called()

    def test_text_required(self, auth_client, llm):
        response = auth_client.post(self.url, {}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {'success': False, 'error': 'Text input is required'}
        llm.assert_not_called()

    def test_blank_text(self, auth_client, llm):
        response = auth_client.post(self.url, {'text': '   '}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Text input is required'

    @pytest.mark.parametrize('body', [[], 'latte', 42])
    def test_body_must_be_an_object(self, auth_client, llm, body):
        response = auth_client.post(self.url, body, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {'success': False, 'error': 'Text input is required'}
        llm.assert_not_called()

    @pytest.mark.parametrize('text', [123, 4.5, ['latte'], {'drink': 'latte'}, True])
    def test_text_must_be_a_string(self, auth_client, llm, text):
        response = auth_client.post(self.url, {'text': text}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {'success': False, 'error': 'Text input is required'}
        llm.assert_not_called()

    def test_text_too_long(self, auth_client, llm):
        response = auth_client.post(self.url, {'text': 'x' * 1001}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Text input must be under 1000 characters'
        llm.assert_not_called()

    def test_parse(self, auth_client, cafes, llm):
        llm.return_value = tool_response('parse_drink', {
            'drink_type': 'Flat White',
            'cafe_name': 'Sightglass',
            'rating': 9,
            'price': 4.25,
            'flavor_tags': ['Smooth'],
            'interpretation': 'Flat white at Sightglass',
        })

        response = auth_client.post(self.url, {'text': 'flat white at sightglass, loved it'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['success'] is True
        assert response.data['data']['cafe_id'] == str(cafes[1].id)
        assert response.data['data']['rating'] == 5
        assert response.data['raw_interpretation'] == 'Flat white at Sightglass'

    def test_not_configured(self, auth_client, settings, llm):
        settings.ANTHROPIC_API_KEY = ''

        response = auth_client.post(self.url, {'text': 'latte'}, format='json')

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.data == {'success': False, 'error': 'AI service not configured'}

    def test_upstream_failure_is_generic(self, auth_client, llm):
        llm.side_effect = api_timeout()

        response = auth_client.post(self.url, {'text': 'latte'}, format='json')

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.data == {'success': False, 'error': 'Failed to parse input'}


@pytest.mark.django_db
class TestRecommendationsEndpoint:

    url = reverse('ai:ai-recommendations')

    def test_requires_auth(self, api_client):
        response = api_client.post(self.url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_get_not_allowed(self, auth_client):
        response = auth_client.get(self.url)

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED

    def test_starter_response(self, auth_client, llm):
        response = auth_client.post(self.url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['recommendation']['recommended_tags'] == ['Smooth', 'Chocolatey', 'Caramel']
        assert response.data['user_profile']['total_drinks_analyzed'] == 0
        llm.assert_not_called()

    def test_recommendation(self, auth_client, tasting_history, llm):
        llm.return_value = tool_response('generate_recommendation', {
            'suggestion': 'Try an Ethiopian natural.',
            'reasoning': 'Fruity coffees score highest for you.',
            'recommended_tags': ['Berry', 'Floral'],
        })

        response = auth_client.post(self.url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['recommendation']['recommended_tags'] == ['Berry', 'Floral']
        assert response.data['recommendation']['try_next_drink'] is None
        assert response.data['user_profile']['total_drinks_analyzed'] == 4

    def test_upstream_failure(self, auth_client, tasting_history, llm):
        llm.return_value = tool_response('wrong_tool', {})

        response = auth_client.post(self.url)

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.data == {'success': False, 'error': 'Failed to generate recommendations'}
