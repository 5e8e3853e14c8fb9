import uuid
import pytest
from django.urls import reverse
from rest_framework import status
from apps.cafes.models import Cafe
from apps.wishlist.models import WishlistItem


# =============================================================================
# Wishlist List / Add Tests
# =============================================================================

@pytest.mark.django_db
class TestWishlistList:
    """Tests for GET /api/wishlist"""

    def test_list_newest_first(self, auth_client, user_id):
        url = reverse('wishlist:wishlist-list')
        auth_client.post(url, {'name': 'First'}, format='json')
        auth_client.post(url, {'name': 'Second'}, format='json')

        response = auth_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert [i['name'] for i in response.data] == ['Second', 'First']

    def test_list_only_own_items(self, auth_client, wishlist_item, foreign_wishlist_item):
        response = auth_client.get(reverse('wishlist:wishlist-list'))

        assert [i['id'] for i in response.data] == [str(wishlist_item.id)]


@pytest.mark.django_db
class TestWishlistAdd:
    """Tests for POST /api/wishlist"""

    def test_add_item(self, auth_client, user_id):
        data = {
            'name': 'Saint Frank',
            'address': '2340 Polk St',
            'city': 'San Francisco',
            'place_id': 'place_saint_frank',
            'lat': 37.79,
            'lng': -122.42,
            'notes': 'Recommended by a friend',
        }
        response = auth_client.post(reverse('wishlist:wishlist-list'), data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['name'] == 'Saint Frank'
        assert WishlistItem.objects.filter(user_id=user_id, place_id='place_saint_frank').exists()

    def test_name_required(self, auth_client):
        response = auth_client.post(reverse('wishlist:wishlist-list'), {'city': 'Rome'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_html_stripped(self, auth_client):
        data = {'name': '<b>Bold</b> Cafe', 'notes': '<script>alert(1)</script>Great view'}
        response = auth_client.post(reverse('wishlist:wishlist-list'), data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['name'] == 'Bold Cafe'
        assert response.data['notes'] == 'alert(1)Great view'

    def test_name_of_only_tags_rejected(self, auth_client):
        response = auth_client.post(reverse('wishlist:wishlist-list'), {'name': '<br/>'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {'error': 'name is required'}

    def test_notes_truncated(self, auth_client):
        data = {'name': 'Long Notes', 'notes': 'x' * 1500}
        response = auth_client.post(reverse('wishlist:wishlist-list'), data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert len(response.data['notes']) == 1000

    def test_duplicate_place_rejected(self, auth_client, wishlist_item):
        data = {'name': 'Tartine Bakery', 'place_id': wishlist_item.place_id}
        response = auth_client.post(reverse('wishlist:wishlist-list'), data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {'error': 'Already in wishlist'}

    def test_already_visited_rejected(self, auth_client, visited_cafe):
        data = {'name': 'Sightglass', 'place_id': visited_cafe.place_id}
        response = auth_client.post(reverse('wishlist:wishlist-list'), data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {'error': 'Already visited this cafe'}

    def test_same_name_without_place_allowed(self, auth_client, user_id):
        url = reverse('wishlist:wishlist-list')
        auth_client.post(url, {'name': 'Somewhere'}, format='json')
        response = auth_client.post(url, {'name': 'Somewhere'}, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert WishlistItem.objects.filter(user_id=user_id).count() == 2


# =============================================================================
# Wishlist Remove Tests
# =============================================================================

@pytest.mark.django_db
class TestWishlistRemove:
    """Tests for DELETE /api/wishlist/{id}"""

    def test_remove_item(self, auth_client, wishlist_item):
        url = reverse('wishlist:wishlist-detail', kwargs={'item_id': wishlist_item.id})
        response = auth_client.delete(url)

        assert response.status_code == status.HTTP_200_OK
        assert not WishlistItem.objects.filter(id=wishlist_item.id).exists()

    def test_remove_foreign_item(self, auth_client, foreign_wishlist_item):
        url = reverse('wishlist:wishlist-detail', kwargs={'item_id': foreign_wishlist_item.id})
        response = auth_client.delete(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert WishlistItem.objects.filter(id=foreign_wishlist_item.id).exists()


# =============================================================================
# Wishlist Visit (Conversion) Tests
# =============================================================================

@pytest.mark.django_db
class TestWishlistVisit:
    """Tests for POST /api/wishlist/{id}/visit"""

    def test_convert_to_cafe(self, auth_client, wishlist_item, user_id):
        """Item leaves the wishlist and shows up as a cafe with its details."""
        url = reverse('wishlist:wishlist-visit', kwargs={'item_id': wishlist_item.id})
        response = auth_client.post(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['name'] == 'Tartine'

        wishlist = auth_client.get(reverse('wishlist:wishlist-list')).data
        assert str(wishlist_item.id) not in [i['id'] for i in wishlist]

        cafes = auth_client.get(reverse('cafes:cafe-list')).data
        assert len(cafes) == 1
        cafe = cafes[0]
        assert cafe['name'] == 'Tartine'
        assert cafe['address'] == '600 Guerrero St'
        assert cafe['city'] == 'San Francisco'
        assert cafe['place_id'] == 'place_tartine'
        assert cafe['lat'] == 37.76
        assert cafe['lng'] == -122.42

    def test_convert_twice(self, auth_client, wishlist_item):
        """Second conversion of the same item is a 404."""
        url = reverse('wishlist:wishlist-visit', kwargs={'item_id': wishlist_item.id})
        auth_client.post(url)
        response = auth_client.post(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data == {'error': 'Wishlist item not found'}

    def test_convert_missing_item(self, auth_client):
        url = reverse('wishlist:wishlist-visit', kwargs={'item_id': uuid.uuid4()})
        response = auth_client.post(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_convert_foreign_item(self, auth_client, foreign_wishlist_item):
        url = reverse('wishlist:wishlist-visit', kwargs={'item_id': foreign_wishlist_item.id})
        response = auth_client.post(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert WishlistItem.objects.filter(id=foreign_wishlist_item.id).exists()
        assert not Cafe.objects.exists()
