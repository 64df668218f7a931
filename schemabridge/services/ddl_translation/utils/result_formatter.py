"""
Result formatting utilities for batch DDL conversion.
"""
from typing import Any, Dict, List


def create_result_dictionary(results: List[Dict[str, Any]], target: str, **kwargs) -> Dict[str, Any]:
    """
    Create the standardized result dictionary for a batch conversion.

    Args:
        results: Per-table results, each with a ``status`` of 'success' or 'error'
        target: Target dialect value of the run
        **kwargs: Extra keys copied onto the result as-is

    Returns:
        Dictionary with overall status, message, stats, results and the
        combined script of every successful table.
    """
    successful = [r for r in results if r.get('status') == 'success']
    failed = [r for r in results if r.get('status') == 'error']

    if not results:
        status, message = 'error', 'No tables were provided for conversion.'
    elif not failed:
        status, message = 'success', f"Converted {len(successful)} table(s) to {target}."
    elif successful:
        status, message = 'partial_success', f"Converted {len(successful)} of {len(results)} table(s) to {target}."
    else:
        status, message = 'error', f"All {len(results)} table(s) failed to convert."

    script_parts = [f"-- Table: {r['table']}\n{r['ddl']}" for r in successful]

    result = {
        "status": status,
        "message": message,
        "target_dialect": target,
        "stats": {
            "tables_total": len(results),
            "tables_successful": len(successful),
            "tables_failed": len(failed),
        },
        "results": results,
        "script": "\n\n".join(script_parts),
    }
    result.update(kwargs)
    return result
