from scriptorium.infra.loaders.frontmatter import load_post, load_posts

__all__ = ["load_post", "load_posts"]
