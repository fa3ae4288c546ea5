from jinja2 import Environment

from scriptorium.core.index import CategoryIndex
from scriptorium.core.types import Post
from scriptorium.engine.template_helpers import register_category_helpers


def test_register_category_helpers_exposes_globals():
    posts = [Post(title="B", categories=["x"]), Post(title="A", categories=["x", "y"])]
    env = Environment()

    index = register_category_helpers(env, lambda: posts)

    assert isinstance(index, CategoryIndex)
    template = env.from_string("{{ find_all_categories() | join(',') }}")
    assert template.render() == "x,y"


def test_templates_can_iterate_groups():
    posts = [Post(title="Z"), Post(title="A", categories=["y"])]
    env = Environment()
    register_category_helpers(env, lambda: posts)

    template = env.from_string(
        "{% for category, items in all_categories_with_posts().items() %}"
        "{{ category }}={{ items | map(attribute='title') | join('+') }};"
        "{% endfor %}"
    )

    assert template.render() == "Uncategorized=Z;y=A;"


def test_templates_see_current_articles():
    posts: list[Post] = []
    env = Environment()
    register_category_helpers(env, lambda: posts)
    template = env.from_string("{{ find_all_categories() | length }}")

    assert template.render() == "0"
    posts.append(Post(title="Later", categories=["late"]))
    assert template.render() == "1"


def test_slugify_filter_is_registered():
    env = Environment()
    register_category_helpers(env, list)

    assert env.from_string("{{ 'Machine Learning' | slugify }}").render() == "machine-learning"


def test_templates_get_sorted_articles_and_sentinel():
    posts = [Post(title="Second", categories=["x"]), Post(title="First")]
    env = Environment()
    register_category_helpers(env, lambda: iter(posts))

    template = env.from_string(
        "{{ sorted_articles() | map(attribute='title') | join(',') }}|"
        "{{ all_categories_with_posts()[UNCATEGORIZED] | map(attribute='title') | join(',') }}"
    )

    assert template.render() == "Second,First|First"
    assert env.globals["UNCATEGORIZED"] == "Uncategorized"
