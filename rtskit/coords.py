"""Conversions between window, normalised device, UI and world coordinates."""

from rtskit.vecmath import RVec2


def window_to_ndc(window, resolution):
    """Map a window pixel to normalised device coordinates in [-1, 1]."""
    return (window.to_rvec2() / resolution.to_rvec2()) * 2 - 1


def ndc_to_world(ndc, aspect_ratio, zoom):
    """Map normalised device coordinates to integer world coordinates."""
    scaled = ndc / zoom
    return RVec2(scaled.x, scaled.y / aspect_ratio).to_ivec2()


def window_to_world(window, resolution, aspect_ratio, zoom):
    return ndc_to_world(window_to_ndc(window, resolution), aspect_ratio, zoom)


def ndc_to_ui(ndc, aspect_ratio):
    return RVec2(ndc.x, ndc.y / aspect_ratio)


def window_to_ui(window, resolution, aspect_ratio):
    return ndc_to_ui(window_to_ndc(window, resolution), aspect_ratio)


def ui_to_ndc(ui, aspect_ratio):
    return RVec2(ui.x, ui.y * aspect_ratio)


def ui_to_world(ui, aspect_ratio, zoom):
    return ndc_to_world(ui_to_ndc(ui, aspect_ratio), aspect_ratio, zoom)