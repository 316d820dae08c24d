"""Link crawler: render one page and list its same-site links."""

__version__ = "0.1.0"
