"""Run configuration shared by the benchmark drivers."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Configuration:
    """Settings controlling debugging, benchmarking and graph sizes."""

    debug_level: int = 0
    run_performance_benchmark: bool = False
    loop_count: int = 0
    loop_range: list[int] = field(default_factory=list)
    log_scale: bool = False
    compatible_gpu_found: bool = False
    warmup_gpu: bool = False
    default_graph_layer_count: int = 0
    default_graph_operator_size: int = 0
    graph_depth_range: list[int] = field(default_factory=list)

    @classmethod
    def for_cpu(
        cls,
        debug_level: int,
        run_performance_benchmark: bool,
        loop_count: int,
        loop_range: list[int],
        log_scale: bool,
    ) -> Configuration:
        """Build a configuration without any GPU or graph settings."""
        return cls(
            debug_level=debug_level,
            run_performance_benchmark=run_performance_benchmark,
            loop_count=loop_count,
            loop_range=list(loop_range),
            log_scale=log_scale,
        )

    @classmethod
    def for_gpu(
        cls,
        debug_level: int,
        run_performance_benchmark: bool,
        loop_count: int,
        loop_range: list[int],
        log_scale: bool,
        compatible_gpu_found: bool,
        warmup_gpu: bool,
        default_graph_layer_count: int,
        default_graph_operator_size: int,
        graph_depth_range: list[int],
    ) -> Configuration:
        """Build a full configuration; both ranges must have the same length."""
        if len(loop_range) != len(graph_depth_range):
            raise ValueError(
                f"loop_range and graph_depth_range must have the same length: "
                f"{len(loop_range)} != {len(graph_depth_range)}."
            )
        return cls(
            debug_level=debug_level,
            run_performance_benchmark=run_performance_benchmark,
            loop_count=loop_count,
            loop_range=list(loop_range),
            log_scale=log_scale,
            compatible_gpu_found=compatible_gpu_found,
            warmup_gpu=warmup_gpu,
            default_graph_layer_count=default_graph_layer_count,
            default_graph_operator_size=default_graph_operator_size,
            graph_depth_range=list(graph_depth_range),
        )