"""
Integration tests for the color detection orchestrator.
"""
import numpy as np
import pytest

from clothcolor import ColorLabel, ImageBuffer, create_orchestrator
from clothcolor.config import Config
from clothcolor.schemas import EMPTY_RESULT
from clothcolor.services.colors.analysis import best_effort_result, classify_region
from clothcolor.services.colors.classifier import PaletteClassifier
from clothcolor.services.colors.extraction import DominantColorExtractor
from clothcolor.services.colors.sampling import RegionSampler
from clothcolor.services.orchestrator import ColorDetectionOrchestrator

from conftest import solid_image


@pytest.fixture
def orchestrator(rng):
    return create_orchestrator(rng=rng)


class TestAnalyzeRegion:
    """Mean color scenarios"""

    def test_crimson(self, orchestrator):
        img = solid_image(8, 8, (220, 20, 60))
        result = orchestrator.analyze_region(img, 0, 0, 8, 8)
        assert result.label == ColorLabel.RED
        assert result.confidence == pytest.approx(0.8)
        assert result.hsv.h == pytest.approx(348.0)

    def test_near_white(self, orchestrator):
        img = solid_image(8, 8, (245, 245, 245))
        result = orchestrator.analyze_region(img, 0, 0, 8, 8)
        assert result.label == ColorLabel.UNKNOWN
        assert result.confidence == 0.5
        assert result.rgb.as_tuple() == (245, 245, 245)

    def test_sky_blue_region(self, orchestrator, sky_blue_image):
        result = orchestrator.analyze_region(ImageBuffer(sky_blue_image), 0, 0, 10, 10)
        assert result.rgb.as_tuple() == (135, 206, 235)
        assert result.label == ColorLabel.SKY_BLUE

    def test_empty_region(self, orchestrator, sky_blue_image):
        result = orchestrator.analyze_region(sky_blue_image, 0, 0, 0, 10)
        assert result == EMPTY_RESULT
        assert result.rgb.as_tuple() == (0, 0, 0)
        assert (result.hsv.h, result.hsv.s, result.hsv.v) == (0.0, 0.0, 0.0)

    def test_result_serialises(self, orchestrator, sky_blue_image):
        dumped = orchestrator.analyze_region(sky_blue_image, 0, 0, 10, 10).model_dump(mode="json")
        assert dumped["label"] == "sky_blue"
        assert dumped["rgb"] == {"r": 135, "g": 206, "b": 235}


class TestExtractDominantColors:

    def test_uses_configured_k(self, orchestrator, red_and_sky_image):
        results = orchestrator.extract_dominant_colors(red_and_sky_image, 0, 0, 30, 30)
        assert 1 <= len(results) <= orchestrator.default_k
        assert {r.label for r in results} <= {ColorLabel.RED, ColorLabel.SKY_BLUE}

    def test_explicit_k(self, orchestrator, red_and_sky_image):
        results = orchestrator.extract_dominant_colors(red_and_sky_image, 0, 0, 30, 30, k=1)
        assert len(results) == 1


class TestDetectLabel:
    """Best-effort labelling"""

    def test_confident_result_unchanged(self, orchestrator):
        img = solid_image(8, 8, (220, 20, 60))
        assert orchestrator.detect_label(img, 0, 0, 8, 8) == orchestrator.analyze_region(img, 0, 0, 8, 8)

    def test_achromatic_region_is_forced(self, orchestrator):
        img = solid_image(8, 8, (128, 128, 128))
        result = orchestrator.detect_label(img, 0, 0, 8, 8)
        assert result.label == ColorLabel.RED  # hue 0
        assert result.confidence == 0.5

    def test_empty_region_stays_unknown(self, orchestrator, sky_blue_image):
        assert orchestrator.detect_label(sky_blue_image, 0, 0, 0, 0) == EMPTY_RESULT

    def test_rejected_match_is_forced(self):
        class FloorConfig(Config):
            REJECT_BELOW_FLOOR = True
            CONFIDENCE_FLOOR = 0.5

        orchestrator = create_orchestrator(FloorConfig(), rng=np.random.default_rng(0))
        img = solid_image(8, 8, (0, 200, 0))  # green, 55 degrees from sky blue

        assert orchestrator.analyze_region(img, 0, 0, 8, 8).label == ColorLabel.UNKNOWN
        result = orchestrator.detect_label(img, 0, 0, 8, 8)
        assert result.label == ColorLabel.SKY_BLUE
        assert result.confidence == pytest.approx(1 - 55 / 60)

    def test_zero_confidence_black_region_is_forced(self):
        """A non-empty region is forced even when its result matches the empty one"""
        classifier = PaletteClassifier(achromatic_confidence=0.0)
        sampler = RegionSampler()
        orchestrator = ColorDetectionOrchestrator(
            classifier, sampler, DominantColorExtractor(classifier, sampler)
        )
        img = solid_image(10, 10, (0, 0, 0))

        assert orchestrator.analyze_region(img, 0, 0, 10, 10) == EMPTY_RESULT
        result = orchestrator.detect_label(img, 0, 0, 10, 10)
        assert result.label == ColorLabel.RED
        assert result.confidence == 0.0

    def test_best_effort_with_empty_palette(self, orchestrator):
        img = solid_image(4, 4, (128, 128, 128))
        result, count = classify_region(img, 0, 0, 4, 4, orchestrator.classifier, orchestrator.sampler)
        assert count == 4
        assert best_effort_result(result, PaletteClassifier(()), count) is result

    def test_best_effort_skips_empty_sample(self, orchestrator):
        assert best_effort_result(EMPTY_RESULT, orchestrator.classifier, 0) is EMPTY_RESULT


class TestOrchestratorConstruction:

    def test_config_wiring(self):
        class TunedConfig(Config):
            PALETTE = "purple_folded"
            MEAN_STRIDE = 1
            CLUSTER_STRIDE = 4
            DEFAULT_K = 2
            KMEANS_ITERATIONS = 5

        orchestrator = create_orchestrator(TunedConfig())
        assert orchestrator.default_k == 2
        assert orchestrator.sampler.mean_stride == 1
        assert orchestrator.sampler.cluster_stride == 4
        assert orchestrator.extractor.iterations == 5
        assert orchestrator.extractor.classifier is orchestrator.classifier
        assert len(orchestrator.classifier.palette) == 7

    def test_invalid_default_k(self, orchestrator):
        with pytest.raises(ValueError):
            ColorDetectionOrchestrator(
                orchestrator.classifier, orchestrator.sampler, orchestrator.extractor, default_k=0
            )
