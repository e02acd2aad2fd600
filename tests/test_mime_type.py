import pytest

from avantutil.mime_type import MimeTypeNotFound, get_extensions, get_type


@pytest.mark.parametrize(
    "filename, expected",
    [
        ("index.html", "text/html; charset=utf-8;"),
        ("photo.JPG", "image/jpeg"),
        ("archive.tar.gz", "application/gzip"),
        ("styles.css", "text/css"),
        ("/srv/www/app.js", "application/javascript; charset=utf-8;"),
    ],
)
def test_get_type_known_extensions(filename, expected):
    assert get_type(filename) == expected


def test_name_without_dot_is_looked_up_whole():
    assert get_type("txt") == "text/plain; charset=utf-8;"


def test_unknown_extension_raises():
    with pytest.raises(MimeTypeNotFound):
        get_type("file.unknownext")


def test_empty_extension_raises():
    with pytest.raises(MimeTypeNotFound):
        get_type("trailing.")


def test_not_found_is_lookup_error():
    with pytest.raises(LookupError):
        get_type("noextension")


def test_get_extensions_sorted():
    assert get_extensions("image/jpeg") == ["jpe", "jpeg", "jpg"]


def test_get_extensions_starred_key():
    assert get_extensions("audio/mp3") == ["*mp3"]


def test_get_extensions_unknown_raises():
    with pytest.raises(MimeTypeNotFound):
        get_extensions("application/x-does-not-exist")


@pytest.mark.parametrize("mime", ["application/octet-stream", "text/troff", "model/mesh"])
def test_extensions_round_trip(mime):
    extensions = get_extensions(mime)
    assert extensions == sorted(extensions)
    for ext in extensions:
        assert get_type("file." + ext.upper()) == mime