"""
Main entry point for importing ClickUp CSV exports
"""
import os
import sys
import json
import argparse
from datetime import datetime

from config import CLICKUP_CSV_PATH, OUTPUT_DIR
from importers import ClickUpCsvImporter
from models import ImportResult, ImportSummary
from utils import logger, log_banner


def save_result(result: ImportResult, csv_path: str, output_dir: str) -> str:
    """
    Write an ImportResult to a timestamped JSON file

    Inputs sharing a file name (e.g. q1/tasks.csv and q2/tasks.csv) never
    overwrite each other: an existing output gets a numeric suffix.

    Returns:
        Path of the written file
    """
    if not os.path.exists(output_dir):
        os.makedirs(output_dir)

    stem = os.path.splitext(os.path.basename(csv_path))[0].replace(' ', '_')
    base = f"clickup_import_{stem}_{datetime.now().strftime('%Y%m%d_%H%M%S_%f')}"
    output_file = os.path.join(output_dir, f"{base}.json")
    counter = 2
    while os.path.exists(output_file):
        output_file = os.path.join(output_dir, f"{base}_{counter}.json")
        counter += 1

    # 'x' refuses to replace a file created between the check and the write
    with open(output_file, 'x', encoding='utf-8') as f:
        json.dump(result.to_dict(), f, indent=2, ensure_ascii=False)
    return output_file


def import_single_file(csv_path: str, summary: ImportSummary, output_dir: str = OUTPUT_DIR,
                       save: bool = True) -> dict:
    """
    Import a single ClickUp CSV export

    Args:
        csv_path: Path to the exported CSV file
        summary: Import summary tracker
        output_dir: Directory for the JSON result
        save: Write the result to output_dir when True

    Returns:
        dict: 'success' (bool), 'file', and on success 'result' and 'output_file'
    """
    importer = ClickUpCsvImporter(csv_path)
    logger.info(f"Importer: {importer.name} (default team: {importer.default_team_name})")

    try:
        result = importer.import_data()
    except (OSError, UnicodeDecodeError) as e:
        error_msg = f"Could not read {csv_path}: {e}"
        logger.error(f"✗ {error_msg}")
        summary.add_failure(error_msg)
        return {'success': False, 'file': csv_path, 'error': str(e)}
    except Exception as e:
        error_msg = f"Error importing {csv_path}: {e}"
        logger.exception(f"✗ {error_msg}")
        summary.add_failure(error_msg)
        return {'success': False, 'file': csv_path, 'error': str(e)}

    output_file = None
    if save:
        try:
            output_file = save_result(result, csv_path, output_dir)
        except OSError as e:
            error_msg = f"Could not save result for {csv_path} to {output_dir}: {e}"
            logger.error(f"✗ {error_msg}")
            summary.add_failure(error_msg)
            return {'success': False, 'file': csv_path, 'error': str(e)}
        logger.info(f"✓ Result saved to: {output_file}")

    summary.add_success(importer.rows_read, result)

    return {'success': True, 'file': csv_path, 'result': result, 'output_file': output_file}


def main(argv=None):
    """Main execution function"""
    parser = argparse.ArgumentParser(
        description='Convert ClickUp CSV exports into issues, labels and users',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py export.csv
  python main.py space1.csv space2.csv --output-dir results
  python main.py  # Uses CLICKUP_CSV_PATH from the environment / .env
        """
    )
    parser.add_argument(
        'csv_paths',
        nargs='*',
        help='One or more ClickUp CSV export files'
    )
    parser.add_argument(
        '--output-dir',
        default=OUTPUT_DIR,
        help=f'Directory for JSON results (default: {OUTPUT_DIR})'
    )
    parser.add_argument(
        '--no-save',
        action='store_true',
        help='Transform only, do not write JSON results'
    )
    args = parser.parse_args(argv)

    log_banner("CLICKUP CSV IMPORT")

    csv_paths = args.csv_paths
    if csv_paths:
        logger.info(f"Using export files from command line: {csv_paths}")
    elif CLICKUP_CSV_PATH:
        csv_paths = [CLICKUP_CSV_PATH]
        logger.info(f"Using CLICKUP_CSV_PATH from configuration: {CLICKUP_CSV_PATH}")
    else:
        logger.error("No export file provided via command line and CLICKUP_CSV_PATH is not set")
        logger.error("Usage: python main.py <export.csv> [export2.csv] ...")
        return 1

    summary = ImportSummary()
    all_results = []

    for idx, csv_path in enumerate(csv_paths, 1):
        log_banner(f"FILE {idx}/{len(csv_paths)}: {csv_path}", char='#')
        result = import_single_file(csv_path, summary, output_dir=args.output_dir, save=not args.no_save)
        all_results.append(result)

        if result['success']:
            logger.info(f"✓ Successfully imported: {csv_path}")
        else:
            logger.error(f"✗ Failed to import: {csv_path}")

    summary.print_summary()

    logger.info("File Details:")
    for idx, result in enumerate(all_results, 1):
        status = "✓" if result['success'] else "✗"
        logger.info(f"  {idx}. {status} {result['file']}")
        if result['success'] and result['output_file']:
            logger.info(f"       Output: {result['output_file']}")
        elif not result['success']:
            logger.info(f"       Error: {result['error']}")

    return 1 if summary.failed else 0


if __name__ == '__main__':
    sys.exit(main())
