from .coin_pipeline import PipelineResult, build_coin_table, fetch_markdown, run_coin_pipeline

__all__ = ["PipelineResult", "build_coin_table", "fetch_markdown", "run_coin_pipeline"]
