from watchnext.schemas.media import MediaType, MovieItem, SearchResults, TVItem
from watchnext.services.normalizer import (
    build_image_url,
    normalize_media_item,
    normalize_results,
    resolve_media_type,
    transform_response,
)


def dump(model):
    return model.model_dump(mode="json", by_alias=True, exclude_unset=True)


def test_movie_detail(movie_payload):
    item = normalize_media_item(movie_payload, MediaType.MOVIE)

    assert isinstance(item, MovieItem)
    assert dump(item) == {
        "id": "tmdb-movie-550",
        "tmdbId": 550,
        "type": "movie",
        "title": "Fight Club",
        "overview": "An insomniac office worker...",
        "releaseDate": "1999-10-15",
        "posterPath": "https://image.tmdb.org/t/p/w500/pB8BM7pdSp6B6Ih7QZ4DrQ3PmJK.jpg",
        "backdropPath": "https://image.tmdb.org/t/p/original/hZkgoQYus5vegHoetLkCJzb17zJ.jpg",
        "rating": 8.4,
        "voteCount": 26280,
        "popularity": 61.416,
        "genreIds": [18],
        "originalLanguage": "en",
        "adult": False,
        "runtime": 139,
    }


def test_tv_detail_keeps_tv_fields(tv_payload):
    item = normalize_media_item(tv_payload, MediaType.TV)

    assert isinstance(item, TVItem)
    data = dump(item)
    assert data["id"] == "tmdb-tv-1399"
    assert data["title"] == "Game of Thrones"
    assert data["releaseDate"] == "2011-04-17"
    assert data["episodeRunTime"] == [60]
    assert data["numberOfEpisodes"] == 73
    assert data["numberOfSeasons"] == 8
    assert data["genreIds"] == [10765, 18]
    assert "adult" not in data
    assert "runtime" not in data


def test_hint_is_trusted_over_payload(movie_payload):
    item = normalize_media_item(movie_payload, MediaType.TV)

    # No "name" or "first_air_date" on a movie payload
    assert item.type == MediaType.TV
    assert item.id == "tmdb-tv-550"
    assert item.title == ""
    assert item.release_date == ""


def test_tv_list_item_has_no_optional_fields():
    item = normalize_media_item({"id": 7, "name": "Show", "genre_ids": [35]}, MediaType.TV)
    data = dump(item)

    for key in ("episodeRunTime", "numberOfEpisodes", "numberOfSeasons", "adult"):
        assert key not in data


def test_movie_without_adult_flag_omits_it():
    data = dump(normalize_media_item({"id": 3, "title": "No flag"}, MediaType.MOVIE))
    assert "adult" not in data


def test_null_images_stay_null():
    item = normalize_media_item(
        {"id": 9, "title": "Bare", "poster_path": None, "backdrop_path": None},
        MediaType.MOVIE,
    )
    assert item.poster_path is None
    assert item.backdrop_path is None
    assert dump(item)["posterPath"] is None


def test_null_numeric_fields_pass_through():
    item = normalize_media_item(
        {"id": 11, "title": "Unrated", "vote_average": None, "vote_count": None, "popularity": 0.6},
        MediaType.MOVIE,
    )
    data = dump(item)

    assert data["rating"] is None
    assert data["voteCount"] is None
    assert data["popularity"] == 0.6


def test_missing_numeric_fields_are_omitted():
    data = dump(normalize_media_item({"id": 12, "name": "Sparse"}, MediaType.TV))

    for key in ("rating", "voteCount", "popularity"):
        assert key not in data


def test_build_image_url():
    assert build_image_url("/a.jpg", "w500") == "https://image.tmdb.org/t/p/w500/a.jpg"
    assert build_image_url("/a.jpg", "original") == "https://image.tmdb.org/t/p/original/a.jpg"
    assert build_image_url(None, "w500") is None
    assert build_image_url("", "w500") is None


def test_normalizing_twice_gives_equal_items(movie_payload):
    first = normalize_media_item(movie_payload, MediaType.MOVIE)
    second = normalize_media_item(movie_payload, MediaType.MOVIE)
    assert first == second
    assert dump(first) == dump(second)


def test_discriminator_resolution():
    assert resolve_media_type({"media_type": "movie"}) == MediaType.MOVIE
    assert resolve_media_type({"media_type": "tv"}) == MediaType.TV
    assert resolve_media_type({}) == MediaType.TV
    assert resolve_media_type({"media_type": None}) == MediaType.TV
    assert resolve_media_type({"media_type": "person"}) is None


def test_mixed_list(trending_payload):
    results = normalize_results(trending_payload)

    assert isinstance(results, SearchResults)
    assert [item.id for item in results.results] == ["tmdb-movie-1", "tmdb-tv-2"]
    assert results.results[0].title == "Trending Movie"
    assert results.results[1].title == "Trending TV Show"
    assert (results.page, results.total_pages, results.total_results) == (1, 10, 200)


def test_mixed_list_defaults_missing_discriminator_to_tv():
    results = normalize_results(
        {"page": 1, "results": [{"id": 5, "name": "Unlabeled"}], "total_pages": 1, "total_results": 1}
    )
    assert results.results[0].type == MediaType.TV
    assert results.results[0].id == "tmdb-tv-5"


def test_mixed_list_drops_people():
    data = {
        "page": 1,
        "results": [
            {"id": 1, "media_type": "person", "name": "Someone"},
            {"id": 2, "media_type": "movie", "title": "Film"},
        ],
        "total_pages": 1,
        "total_results": 2,
    }
    results = normalize_results(data)

    assert [item.id for item in results.results] == ["tmdb-movie-2"]
    assert results.total_results == 2


def test_hinted_list_ignores_discriminator():
    data = {"page": 2, "results": [{"id": 4, "title": "Film"}], "total_pages": 3, "total_results": 41}
    results = normalize_results(data, MediaType.MOVIE)

    assert results.results[0].id == "tmdb-movie-4"
    assert results.page == 2


def test_transform_dispatch(trending_payload, movie_payload, tv_payload):
    assert isinstance(transform_response("trending/all/week", trending_payload), SearchResults)
    assert isinstance(transform_response("search/multi", trending_payload), SearchResults)
    assert transform_response("discover/movie", {"results": [{"id": 1}]}).results[0].type == MediaType.MOVIE
    assert transform_response("discover/tv", {"results": [{"id": 1}]}).results[0].type == MediaType.TV
    assert transform_response("movie/popular", {"results": [{"id": 1}]}).results[0].type == MediaType.MOVIE
    assert transform_response("tv/1399/similar", {"results": [{"id": 1}]}).results[0].type == MediaType.TV
    assert isinstance(transform_response("movie/550", movie_payload), MovieItem)
    assert isinstance(transform_response("tv/1399", tv_payload), TVItem)


def test_transform_genres_keeps_only_genres():
    data = {"genres": [{"id": 28, "name": "Action"}], "extra": True}
    result = transform_response("genre/movie/list", data)
    assert result.model_dump() == {"genres": [{"id": 28, "name": "Action"}]}


def test_transform_passes_other_endpoints_through():
    videos = {"id": 550, "results": [{"key": "abc", "site": "YouTube"}]}
    assert transform_response("movie/550/videos", videos) is videos
    providers = {"id": 550, "results": {"US": {"flatrate": []}}}
    assert transform_response("movie/550/watch/providers", providers) is providers
