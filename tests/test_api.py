"""Tests for the HTTP conversion service."""

import pytest
from fastapi.testclient import TestClient

import main
from main import app


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    response = client.get('/health')
    assert response.status_code == 200
    assert response.json() == {'status': 'ok'}


@pytest.mark.parametrize('path', ['/convert', '/api/convert'])
def test_convert_html_text(client, path):
    response = client.post(path, data={'text': '<p><b>hi</b></p>'})
    assert response.status_code == 200
    assert response.headers['content-type'].startswith('application/xml')
    assert '<w:b />' in response.text


def test_convert_markdown_text(client):
    response = client.post('/convert', data={'text': '*hi*', 'format': 'markdown'})
    assert response.status_code == 200
    assert '<w:i />' in response.text


def test_convert_uploaded_file(client):
    files = {'file': ('field.html', b'<p>uploaded</p>', 'text/html')}
    response = client.post('/convert', files=files)
    assert response.status_code == 200
    assert 'uploaded</w:t>' in response.text


def test_list_ids_unique_across_requests(client):
    first = client.post('/convert', data={'text': '<ul><li>a</li></ul>'}).text
    second = client.post('/convert', data={'text': '<ul><li>a</li></ul>'}).text
    assert first != second


def test_no_content(client):
    assert client.post('/convert', data={}).status_code == 400


def test_unknown_format(client):
    response = client.post('/convert', data={'text': 'x', 'format': 'rtf'})
    assert response.status_code == 400


def test_unsupported_element(client):
    response = client.post('/convert', data={'text': '<table></table>'})
    assert response.status_code == 422
    assert 'table' in response.json()['detail']


def test_upload_not_utf8(client):
    files = {'file': ('field.html', b'<p>\xff\xfe bad</p>', 'text/html')}
    response = client.post('/convert', files=files)
    assert response.status_code == 400
    assert response.json()['detail'] == 'File is not valid UTF-8'


def test_numbering_definitions_not_kept_between_requests(client):
    before = main.numbering.definitions
    for _ in range(50):
        response = client.post('/convert', data={'text': '<ul><li>a</li></ul>'})
        assert response.status_code == 200
    assert main.numbering.definitions == before == ()
