"""Prerender — render static pages from a build's render module.

Runs a user render function for each requested path, stores every page
under a clean-URL asset name, and optionally crawls same-site links in the
rendered HTML to discover more pages.

Quick start::

    import prerender

    prerender.build("my-site/", paths=["/"], crawl=True)

Programmatic use against an existing compilation::

    from prerender import StaticSiteGenerator
    from prerender.host import Compilation

    compilation = Compilation.from_directory(Path("build"))
    StaticSiteGenerator(entry="render", crawl=True).apply(compilation)
    await compilation.run_output_phase()

"""

__version__ = "0.1.0"
__all__ = [
    "PrerenderConfig",
    "StaticSiteGenerator",
    "__version__",
    "build",
    "render_all",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import prerender`` fast while providing a clean top-level API.
    """
    if name == "PrerenderConfig":
        from prerender.config import PrerenderConfig

        return PrerenderConfig

    if name == "StaticSiteGenerator":
        from prerender.generator import StaticSiteGenerator

        return StaticSiteGenerator

    if name == "build":
        from prerender.app import build

        return build

    if name == "render_all":
        from prerender.export.traversal import render_all

        return render_all

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
