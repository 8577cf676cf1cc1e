"""
Tests unitaires du codec d'enregistrements (ligne <-> entite).

Tests couvrant:
- Format exact des lignes film et compte
- Rejet des lignes au mauvais nombre de champs
- Rejet des annees et notes non numeriques
- Nettoyage des espaces en bordure de champ
"""

import pytest

from cinemanager.core.entities import Movie, User
from cinemanager.core.errors import MalformedRecordError
from cinemanager.infrastructure.persistence.record_codec import (
    decode_movie,
    decode_user,
    encode_movie,
    encode_user,
    format_rating,
    is_storable_field,
    split_records,
)


class TestMovieCodec:
    """Tests pour encode_movie / decode_movie."""

    def test_encode_uses_fixed_field_order(self, inception: Movie):
        """Les 7 champs sont ecrits dans l'ordre fixe du format."""
        assert encode_movie(inception) == (
            "Inception,Nolan,2010,/media/inception,Sci-Fi,8.8,tt1375666"
        )

    def test_encode_whole_rating_keeps_decimal_point(self):
        """Une note entiere est ecrite avec .0, comme les fichiers existants."""
        movie = Movie(title="Up", release_year=2009, rating=8)
        assert encode_movie(movie) == "Up,,2009,,,8.0,"

    def test_decode_existing_line(self):
        movie = decode_movie("The Matrix,Wachowski,1999,/films/matrix,Action,8.7,tt0133093")
        assert movie == Movie(
            title="The Matrix",
            director="Wachowski",
            release_year=1999,
            media_path="/films/matrix",
            categories="Action",
            rating=8.7,
            external_id="tt0133093",
        )

    def test_decode_trims_fields(self):
        """Les espaces autour des champs sont retires."""
        movie = decode_movie(" Up , Docter , 2009 ,  , Animation , 8.3 , tt1049413 ")
        assert movie.title == "Up"
        assert movie.director == "Docter"
        assert movie.release_year == 2009
        assert movie.media_path == ""
        assert movie.rating == 8.3
        assert movie.external_id == "tt1049413"

    def test_decode_accepts_trailing_empty_field(self):
        """Un identifiant externe vide en fin de ligne reste un 7e champ."""
        movie = decode_movie("Up,Docter,2009,,,8.0,")
        assert movie.external_id == ""
        assert movie.categories == ""

    def test_decode_round_trip(self, inception: Movie, up: Movie):
        for movie in (inception, up):
            assert decode_movie(encode_movie(movie)) == movie

    @pytest.mark.parametrize(
        "line",
        [
            "Up,Docter,2009,,Animation,8.3",
            "Up,Docter,2009,,Animation,8.3,tt1,extra",
            "",
        ],
    )
    def test_decode_rejects_wrong_field_count(self, line: str):
        with pytest.raises(MalformedRecordError):
            decode_movie(line)

    def test_decode_rejects_non_integer_year(self):
        with pytest.raises(MalformedRecordError) as exc_info:
            decode_movie("Up,Docter,2009.5,,Animation,8.3,tt1")
        assert "annee" in exc_info.value.reason

    def test_decode_rejects_non_numeric_rating(self):
        with pytest.raises(MalformedRecordError) as exc_info:
            decode_movie("Up,Docter,2009,,Animation,great,tt1")
        assert "note" in exc_info.value.reason

    def test_comma_in_field_breaks_alignment(self):
        """Le delimiteur n'est pas echappe : un champ avec virgule rend la ligne illisible."""
        movie = Movie(title="Up", director="Docter", release_year=2009,
                      categories="Animation, Family", rating=8.3, external_id="tt1")
        with pytest.raises(MalformedRecordError):
            decode_movie(encode_movie(movie))


class TestUserCodec:
    """Tests pour encode_user / decode_user."""

    def test_encode_user(self):
        assert encode_user(User("alice", "secret")) == "alice,secret"

    def test_decode_user(self):
        assert decode_user(" alice , secret ") == User("alice", "secret")

    @pytest.mark.parametrize("line", ["alice", "alice,secret,extra", ""])
    def test_decode_user_rejects_wrong_field_count(self, line: str):
        assert decode_user(line) is None


def test_format_rating():
    assert format_rating(7.5) == "7.5"
    assert format_rating(10) == "10.0"


class TestSplitRecords:
    """Tests pour split_records() et is_storable_field()."""

    def test_splits_on_lf_cr_and_crlf(self):
        assert split_records("a\nb\r\nc\rd") == ["a", "b", "c", "d"]

    @pytest.mark.parametrize("separator", ["\u2028", "\u2029", "\x85", "\x0b", "\x0c", "\x1c"])
    def test_other_unicode_separators_stay_in_the_record(self, separator: str):
        line = f"A{separator}B,X,2000,,,5.0,"

        assert split_records(line + "\n") == [line, ""]
        assert decode_movie(line).title == f"A{separator}B"

    @pytest.mark.parametrize("value", ["a,b", "a\nb", "a\rb"])
    def test_delimiter_and_line_ends_are_not_storable(self, value: str):
        assert is_storable_field(value) is False

    def test_plain_value_is_storable(self):
        assert is_storable_field("Sci-Fi") is True
