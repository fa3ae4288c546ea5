from hypothesis import given
from hypothesis import strategies as st

from scriptorium.core.categories import (
    UNCATEGORIZED,
    all_categories_with_posts,
    find_all_categories,
    has_categories,
)
from scriptorium.core.types import Post

# --- Strategies ---

labels = st.sampled_from(["python", "Python", "web", "data", " data", "Uncategorized", "ünïcode", ""]) | st.text(
    max_size=8
)


def post_strategy():
    return st.builds(
        Post,
        title=st.text(max_size=12),
        categories=st.one_of(st.none(), st.lists(labels, max_size=4)),
    )


posts_strategy = st.lists(post_strategy(), max_size=12)


# --- Tests ---


@given(posts_strategy)
def test_find_all_categories_is_sorted_and_unique(posts: list[Post]):
    categories = find_all_categories(posts)

    assert categories == sorted(categories)
    assert len(categories) == len(set(categories))


@given(posts_strategy)
def test_find_all_categories_matches_declared_labels(posts: list[Post]):
    declared = {label for post in posts for label in post.categories or []}

    assert set(find_all_categories(posts)) == declared


@given(posts_strategy)
def test_groups_are_sorted_and_non_empty(posts: list[Post]):
    groups = all_categories_with_posts(posts)

    assert list(groups) == sorted(groups)
    for members in groups.values():
        assert members
        member_titles = [post.title for post in members]
        assert member_titles == sorted(member_titles)


@given(posts_strategy)
def test_uncategorized_posts_appear_at_most_once(posts: list[Post]):
    doubled = posts + posts
    groups = all_categories_with_posts(doubled)

    for post in posts:
        if not has_categories(post):
            bucket = groups[UNCATEGORIZED]
            assert sum(1 for member in bucket if member == post) == 1


@given(posts_strategy)
def test_categorized_posts_appear_once_per_label_occurrence(posts: list[Post]):
    groups = all_categories_with_posts(posts)

    uncategorized: list[Post] = []
    for post in posts:
        if not has_categories(post) and post not in uncategorized:
            uncategorized.append(post)

    for label, members in groups.items():
        expected = sum((post.categories or []).count(label) for post in posts)
        if label == UNCATEGORIZED:
            expected += len(uncategorized)
        assert len(members) == expected


@given(posts_strategy)
def test_group_keys_match_collected_categories(posts: list[Post]):
    groups = all_categories_with_posts(posts)
    categories = find_all_categories(posts)

    assert set(groups) - {UNCATEGORIZED} == set(categories) - {UNCATEGORIZED}
    assert (UNCATEGORIZED in groups) == (
        UNCATEGORIZED in categories or any(not has_categories(post) for post in posts)
    )
