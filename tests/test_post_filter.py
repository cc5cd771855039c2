from Services.postFilter import PostFilter


def test_empty_filter_matches_everything():
    post_filter = PostFilter()

    assert post_filter.is_empty
    assert post_filter.to_query() == {}


def test_from_args_ignores_blank_values():
    post_filter = PostFilter.from_args({"type": "  ", "category": "", "location": None})

    assert post_filter == PostFilter()
    assert post_filter.is_empty


def test_type_and_category_are_lowercased_exact_matches():
    post_filter = PostFilter.from_args({"type": "LOST", "category": " Wallet "})

    assert post_filter.to_query() == {"type": "lost", "category": "wallet"}


def test_location_is_case_insensitive_substring():
    post_filter = PostFilter(location="Park")

    assert post_filter.to_query() == {"location__icontains": "Park"}


def test_predicates_combine():
    post_filter = PostFilter.from_args({"type": "found", "category": "keys", "location": "station"})

    assert not post_filter.is_empty
    assert post_filter.to_query() == {
        "type": "found",
        "category": "keys",
        "location__icontains": "station",
    }
