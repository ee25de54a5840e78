"""
Noise Sampling CLI Commands for grunge

Command line interface for printing a grid of noise values to the terminal,
handy for checking parameters and seeds without writing a script.
"""

import logging
import sys

import click

import grunge as gr


_GENERATORS = {
    "pink": gr.modules.PinkNoise,
    "billow": gr.modules.BillowNoise,
    "simplex": gr.modules.SimplexNoise,
}


def build_module(kind, seed, frequency, persistence, lacunarity, octaves, offset):
    """Create the generator selected on the command line."""
    module = _GENERATORS[kind](seed)
    module.frequency = frequency
    if isinstance(module, gr.modules.FractalNoise):
        module.persistence = persistence
        module.lacunarity = lacunarity
        module.octaves = octaves
    if isinstance(module, gr.modules.BillowNoise):
        module.offset = offset
    return module


@click.command()
@click.option(
    "--kind",
    "-k",
    type=click.Choice(sorted(_GENERATORS)),
    default="pink",
    show_default=True,
    help="Noise generator to sample",
)
@click.option("--seed", "-s", default=0, show_default=True, type=click.IntRange(min=0), help="Noise seed")
@click.option("--frequency", default=1.0, show_default=True, type=float, help="Input coordinate multiplier")
@click.option("--persistence", default=0.5, show_default=True, type=float, help="Amplitude falloff per octave")
@click.option("--lacunarity", default=2.0, show_default=True, type=float, help="Frequency multiplier per octave")
@click.option("--octaves", "-o", default=6, show_default=True, type=int, help="Number of octaves (2-30)")
@click.option("--offset", default=0.2, show_default=True, type=float, help="Billow offset before the absolute value")
@click.option("--scale", default=None, type=float, help="Multiply the output (scale/bias modifier)")
@click.option("--bias", default=None, type=float, help="Add to the output (scale/bias modifier)")
@click.option("--clamp", "clamp_range", nargs=2, type=float, default=None, help="Clamp the output to LOW HIGH")
@click.option("--nx", default=8, show_default=True, type=click.IntRange(min=1), help="Samples in x direction")
@click.option("--ny", default=8, show_default=True, type=click.IntRange(min=1), help="Samples in y direction")
@click.option("--x0", default=0.0, show_default=True, type=float, help="x coordinate of the first sample")
@click.option("--y0", default=0.0, show_default=True, type=float, help="y coordinate of the first sample")
@click.option("--dx", default=0.1, show_default=True, type=float, help="Spacing between samples")
@click.option("--precision", "-p", default=4, show_default=True, type=click.IntRange(min=0), help="Decimals printed")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def sample(kind, seed, frequency, persistence, lacunarity, octaves, offset, scale, bias,
           clamp_range, nx, ny, x0, y0, dx, precision, verbose):
    """
    Print a grid of noise values.

    Evaluates the selected generator, optionally wrapped with scale/bias and
    clamp modifiers, on an NY x NX grid and prints one row per line.

    Examples:

        # 8x8 pink noise with the default parameters
        grunge-sample

        # Billow noise remapped to [0, 1]
        grunge-sample -k billow --scale 0.5 --bias 0.5 --clamp 0 1
    """
    if verbose:
        gr.setup_logging(logging.DEBUG)

    try:
        module = build_module(kind, seed, frequency, persistence, lacunarity, octaves, offset)
        if scale is not None or bias is not None:
            module = module.scalebias(1.0 if scale is None else scale, 0.0 if bias is None else bias)
        if clamp_range:
            module = module.clamp(*clamp_range)

        if verbose:
            click.echo(f"Sampling {module!r} on a {ny}x{nx} grid", err=True)

        grid = gr.sample_grid(module, nx, ny, x0=x0, y0=y0, dx=dx)

    except (gr.NoiseGenerationError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    for row in grid:
        click.echo(" ".join(f"{v:.{precision}f}" for v in row))


if __name__ == "__main__":
    sample()
