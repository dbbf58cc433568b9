import pytest

pytestmark = pytest.mark.django_db


@pytest.fixture
def coach(django_user_model):
    return django_user_model.objects.create_user(email='coach@example.com', password='pass12345', username='coach')


def test_login_sets_access_cookie(api_client, coach):
    response = api_client.post('/api/auth/login', {'username': 'coach', 'password': 'pass12345'}, format='json')
    assert response.status_code == 200
    assert response.cookies['access_token'].value == response.data['access_token']

    # The cookie alone authenticates follow-up requests
    assert api_client.get('/api/teams/').status_code == 200


def test_login_rejects_bad_password(api_client, coach):
    response = api_client.post('/api/auth/login', {'username': 'coach', 'password': 'nope'}, format='json')
    assert response.status_code == 400
    assert response.data['error'] == 'Invalid credentials'


def test_garbage_cookie_is_rejected(api_client, coach):
    api_client.cookies['access_token'] = 'not-a-token'
    assert api_client.get('/api/teams/').status_code in (401, 403)


def test_username_derived_from_email(django_user_model):
    user = django_user_model.objects.create_user(email='sam.lee@example.com', password='pass12345')
    assert user.username == 'sam.lee'
