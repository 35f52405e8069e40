from silence_overview.services.pipeline import PipelineResult, SilenceOverviewPipeline

__all__ = ["PipelineResult", "SilenceOverviewPipeline"]
