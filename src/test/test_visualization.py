"""
Test the matplotlib render driver, the visualizer facade and the slider viewer.
"""

import pytest
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

# Add src to path
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.config import ViewerConfig
from core.io import generate_cube
from pipeline import CameraState, Frame, WireframePipeline
from visualization import InteractiveViewer, OutputManager, Visualizer, WireframePlotter


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


@pytest.fixture
def cube_frame():
    return WireframePipeline().render(generate_cube(), CameraState())


class TestWireframePlotter:
    """Test WireframePlotter."""

    def test_from_config(self):
        config = ViewerConfig(surface={"width": 640, "height": 320, "stroke_color": "#00ff00"},
                              output={"dpi": 80})
        plotter = WireframePlotter.from_config(config)
        assert plotter.stroke_color == "#00ff00"
        assert plotter.figsize == (8.0, 4.0)

    def test_draw_outlines(self, cube_frame):
        plotter = WireframePlotter()
        fig, ax = plotter.create_figure()
        drawn = plotter.draw(ax, cube_frame)

        assert drawn == 12
        assert len(ax.lines) == 12
        # Each outline is closed
        xs, ys = ax.lines[0].get_data()
        assert len(xs) == 4
        assert (xs[0], ys[0]) == (xs[-1], ys[-1])

    def test_draw_order(self, cube_frame):
        plotter = WireframePlotter()
        fig, ax = plotter.create_figure()
        plotter.draw(ax, cube_frame)
        zorders = [line.get_zorder() for line in ax.lines]
        assert zorders == sorted(zorders)
        assert len(set(zorders)) == len(zorders)

    def test_pixel_axes(self, cube_frame):
        plotter = WireframePlotter(width=800, height=600)
        fig, ax = plotter.create_figure()
        plotter.draw(ax, cube_frame)
        assert ax.get_xlim() == (0.0, 800.0)
        # Screen y grows downward
        assert ax.get_ylim() == (600.0, 0.0)

    def test_redraw_clears(self, cube_frame):
        plotter = WireframePlotter()
        fig, ax = plotter.create_figure()
        plotter.draw(ax, cube_frame)
        plotter.draw(ax, Frame())
        assert len(ax.lines) == 0


class TestVisualizer:
    """Test Visualizer and OutputManager."""

    def test_save_frame(self, tmp_path, cube_frame):
        viz = Visualizer(output_dir=tmp_path)
        assert viz.plot_frame(cube_frame) == 12
        path = viz.finalize(save="frame.png")
        assert path == tmp_path / "frame.png"
        assert path.exists()
        assert viz.fig is None

    def test_finalize_without_figure(self):
        with pytest.raises(ValueError):
            Visualizer().finalize()

    def test_protect_overwrite(self, tmp_path):
        output = OutputManager(tmp_path, protect_overwrite=True)
        assert output.output_dir.parent == tmp_path
        assert output.output_dir.exists()

    def test_turntable(self, tmp_path):
        viz = Visualizer(output_dir=tmp_path)
        frames = viz.plot_turntable(WireframePipeline(), generate_cube(),
                                    CameraState(rotation_y_deg=45.0), steps=3, cols=2)
        assert [f.camera.rotation_y_deg for f in frames] == [45.0, 165.0, 285.0]
        # 2x2 grid, last cell hidden
        assert not viz.axes.flat[3].get_visible()
        assert viz.finalize(save="turntable.png").exists()

    def test_turntable_steps(self):
        with pytest.raises(ValueError):
            Visualizer().plot_turntable(WireframePipeline(), generate_cube(),
                                        CameraState(), steps=0)


class TestInteractiveViewer:
    """Test slider-driven redraws."""

    def make_viewer(self, camera=None):
        return InteractiveViewer(generate_cube(), WireframePipeline(),
                                 WireframePlotter(), camera=camera)

    def test_initial_redraw(self):
        viewer = self.make_viewer()
        assert viewer.redraws == 1
        assert viewer.frame.num_triangles == 12
        assert viewer.slider_rot_y.val == 45.0
        assert viewer.slider_distance.val == 4.0

    def test_slider_changes_camera(self):
        viewer = self.make_viewer()
        viewer.slider_rot_y.set_val(90.0)
        assert viewer.redraws == 2
        assert viewer.camera.rotation_y_deg == 90.0
        assert viewer.frame.camera == viewer.camera

        viewer.slider_rot_x.set_val(-30.0)
        viewer.slider_distance.set_val(2.0)
        assert viewer.redraws == 4
        assert viewer.camera == CameraState(90.0, -30.0, 2.0)

    def test_initial_camera_clamped(self):
        viewer = self.make_viewer(CameraState(rotation_x_deg=-250.0, distance=50.0))
        assert viewer.slider_distance.val == 20.0
        assert viewer.slider_rot_x.val == -180.0
        # The rendered frame uses the same values the handles show
        assert viewer.camera == CameraState(45.0, -180.0, 20.0)
        assert viewer.frame.camera == viewer.camera

    def test_camera_in_range_unchanged(self):
        camera = CameraState(rotation_y_deg=300.0, rotation_x_deg=10.0, distance=1.5)
        assert self.make_viewer(camera).camera == camera

    def test_update(self):
        viewer = self.make_viewer()
        viewer.update(CameraState(rotation_y_deg=10.0))
        assert viewer.redraws == 2
        assert viewer.frame.camera.rotation_y_deg == 10.0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
