from seo_inspector.pipeline import analyze, build_report

__all__ = ["analyze", "build_report"]
