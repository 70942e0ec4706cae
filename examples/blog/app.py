"""Blog — one route table feeding both the router and the templates.

Each path is written once, in the route table. The dispatcher gets
``(pattern, handler)`` pairs from ``bind_routes``; templates build links
with ``url_for``.

Run:
    python app.py
"""

from dataclasses import dataclass

from kida import Environment

from waymark import RouteTable, bind_routes
from waymark.templating.integration import install_url_global

routes = RouteTable()


@dataclass(frozen=True)
class Post:
    slug: str
    title: str


POSTS = {
    p.slug: p for p in (Post("hello-world", "Hello, World"), Post("second-post", "A Second Post"))
}

INDEX = """\
<ul>
{% for post in posts %}
  <li><a href="{{ url_for('Post', post.slug) }}">{{ post.title }}</a></li>
{% end %}
</ul>
<a href="{{ url_for('Search', q='waymark') }}">search</a>"""


@routes.route("Index", "/")
def index() -> str:
    return env.from_string(INDEX).render({"posts": list(POSTS.values())})


@routes.route("Post", "/posts/{slug}")
def show_post(slug: str) -> str:
    return f"<h1>{POSTS[slug].title}</h1><a href=\"{routes_registry.url_for('Index')}\">back</a>"


# Link-only: handled elsewhere, still built from one declaration
routes.add("Search", "/search", query=("q", "page"))

routes_registry = routes.freeze()
env = install_url_global(Environment(autoescape=True), routes_registry)

# A stand-in dispatcher: pattern -> handler
dispatch: dict[str, object] = {}
bind_routes(routes_registry, dispatch.__setitem__)


if __name__ == "__main__":
    print(index())
    print(show_post("hello-world"))
