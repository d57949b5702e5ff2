# -*- coding: utf-8 -*-
"""
Created on Fri Oct 16 14:02:37 2026
"""

# spectra_scan.py  – gaussian-weighted XANES scan over a line or a mesh
# -----------------------------------------------------------------------------
import sys
import logging
import argparse

# ─── common imports ----------------------------------------------------------
from utilities.logger_config import setup_logging
from utilities.utils import determine_configuration_file_type
from utilities.exceptions import SpectraScanError, ScanConfigurationError
from factories.configuration_processor_factory import ConfigurationProcessorFactoryProvider
from factories.parameters_processor_factory import ParametersProcessorFactoryProvider
from factories.point_processor_factory import PointProcessorFactory
from factories.spectrum_source_factory import SpectrumSourceFactory
from factories.scan_writer_factory import ScanWriterFactory
from processors.structure_extender import StructureExtender
from processors.spectrum_loader import SpectrumLoader
from processors.spectral_accumulator import SpectralAccumulator
from calculators.gaussian_weight_calculator import GaussianWeightCalculator
from data_storage.scan_hdf5_saver import ScanHDF5Saver
from data_structures.spectrum import ScanResult

log = logging.getLogger("spectra_scan")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spectra-scan",
        description="Accumulate gaussian-weighted absorption spectra along a line "
                    "or over a mesh spanning the unit cell.",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("-help", action="help", help="show this help message and exit")
    parser.add_argument("-elem", dest="element", help="target element, e.g. fe")
    parser.add_argument("-edge", help="absorption edge of the per-atom spectra, e.g. k")
    parser.add_argument("-s", dest="start", nargs=3, type=float, metavar=("X", "Y", "Z"),
                        help="cartesian start point of a line scan")
    parser.add_argument("-e", dest="end", nargs=3, type=float, metavar=("X", "Y", "Z"),
                        help="cartesian end point of a line scan")
    parser.add_argument("-mesh", nargs=3, type=int, metavar=("NA", "NB", "NC"),
                        help="mesh points along a, b and c")
    parser.add_argument("-g", dest="fwhm", type=float, help="gaussian FWHM (default 3.0)")
    parser.add_argument("-n", dest="num_points", type=int, help="number of line-scan points (default 10)")
    parser.add_argument("-l", dest="limit_dist", type=float, help="cutoff radius (default 4.0)")
    parser.add_argument("-o", dest="output", help="output file (default output.dat)")
    parser.add_argument("-struct", dest="structure", help="structure file, .skl or .rmc6f (default olcao.skl)")
    parser.add_argument("-dir", dest="spectra_dir", help="directory holding the per-atom spectra")
    parser.add_argument("-template", dest="spectrum_template",
                        help="per-atom spectrum file name, e.g. '{element}{atom_id}_{edge}.plot'")
    parser.add_argument("-pdos", dest="pdos_file", help="take spectra from the columns of this PDOS table")
    parser.add_argument("-emin", dest="min_energy", type=float, help="lowest energy in PDOS mode")
    parser.add_argument("-emax", dest="max_energy", type=float, help="highest energy in PDOS mode")
    parser.add_argument("-ne", dest="num_energy_points", type=int, help="energy points in PDOS mode")
    parser.add_argument("-chunks", dest="num_chunks", type=int, help="split the point loop into this many tasks")
    parser.add_argument("-h5", dest="hdf5_output", help="also store the scan in this HDF5 file")
    parser.add_argument("-p", dest="params", help="JSON parameter file, or an earlier scan's HDF5 file")
    parser.add_argument("-log", dest="log_file", help="append log messages to this file")
    parser.add_argument("-v", dest="verbose", action="store_true", help="debug logging")
    return parser


def run_scan(parameters: dict) -> ScanResult:
    """Run one scan from a parsed parameter dict and write its output file(s)."""
    # ─── 1. structure ------------------------------------------------------------
    cfg_type = determine_configuration_file_type(parameters["structure"])
    cfg_proc = ConfigurationProcessorFactoryProvider.get_factory(cfg_type)\
              .create_processor(parameters["structure"])
    cfg_proc.process()
    vectors = cfg_proc.get_vectors()
    atoms = cfg_proc.get_atoms()

    # ─── 2. sample points --------------------------------------------------------
    pt_proc = PointProcessorFactory.create_processor(parameters, vectors)
    pt_proc.process_parameters()
    points = pt_proc.get_point_data()

    # ─── 3. periodic images of the target element ---------------------------------
    element = parameters["element"]
    extended = StructureExtender(parameters["limit_dist"]).extend(atoms, vectors, points)
    targets = extended.select_element(element)
    if targets.num_atoms == 0:
        raise ScanConfigurationError(f"No '{element}' atoms in {parameters['structure']}")

    # ─── 4. spectra ---------------------------------------------------------------
    is_target = (cfg_proc.get_elements() == element).to_numpy()
    central_ids = sorted(int(i) for i in cfg_proc.get_atom_ids()[is_target])
    source = SpectrumSourceFactory.create_source(parameters)
    axis, spectra, spectrum_index = SpectrumLoader(source).load_all(central_ids)

    # ─── 5. accumulation ----------------------------------------------------------
    accumulator = SpectralAccumulator(
        GaussianWeightCalculator(parameters["fwhm"]),
        limit_dist=parameters["limit_dist"],
        num_chunks=parameters["num_chunks"],
    )
    result = accumulator.accumulate(points, targets, axis, spectra, spectrum_index)

    # ─── 6. output ----------------------------------------------------------------
    writer = ScanWriterFactory.create_writer(points.mode, vectors)
    writer.write(result, parameters["output"])
    if parameters.get("hdf5_output"):
        ScanHDF5Saver(parameters["hdf5_output"]).save(result, parameters)
    return result


def main(argv=None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    setup_logging(default_level=logging.DEBUG if args.verbose else logging.INFO, log_file=args.log_file)

    overrides = {
        key: value for key, value in vars(args).items()
        if key not in ("params", "log_file", "verbose")
    }
    if args.pdos_file:
        overrides["spectra_source"] = "pdos"

    try:
        pproc = ParametersProcessorFactoryProvider.get_factory()\
                .create_processor(args.params, overrides=overrides)
        pproc.process()
    except (ScanConfigurationError, OSError, ValueError) as e:
        parser.error(str(e))
    parameters = pproc.get_parameters()

    log.info("Running %s scan for element '%s'",
             "mesh" if parameters["mesh"] is not None else "line", parameters["element"])
    try:
        run_scan(parameters)
    except (SpectraScanError, OSError) as e:
        log.error("Scan failed: %s", e)
        return 1
    log.info("✓ scan written to %s", parameters["output"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
