"""
Bundled plugins, in the order the default Color class installs them.
"""

from . import a11y, cmyk, harmonies, hwb, lab, lch, mix, names, xyz

a11y_plugin = a11y.plugin
cmyk_plugin = cmyk.plugin
harmonies_plugin = harmonies.plugin
hwb_plugin = hwb.plugin
lab_plugin = lab.plugin
lch_plugin = lch.plugin
mix_plugin = mix.plugin
names_plugin = names.plugin
xyz_plugin = xyz.plugin

ALL_PLUGINS = (
    lab_plugin,
    lch_plugin,
    xyz_plugin,
    hwb_plugin,
    cmyk_plugin,
    names_plugin,
    a11y_plugin,
    mix_plugin,
    harmonies_plugin,
)

__all__ = [
    "ALL_PLUGINS",
    "a11y_plugin",
    "cmyk_plugin",
    "harmonies_plugin",
    "hwb_plugin",
    "lab_plugin",
    "lch_plugin",
    "mix_plugin",
    "names_plugin",
    "xyz_plugin",
]
