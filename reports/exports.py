import csv

from django.http import HttpResponse


def export_rows_to_csv(rows, columns, filename):
    """Write report rows to a CSV attachment, one column per report field."""
    response = HttpResponse(content_type='text/csv')
    response['Content-Disposition'] = f'attachment; filename={filename}.csv'

    writer = csv.writer(response)

    # Write headers
    writer.writerow(columns)

    # Write data
    for row in rows:
        writer.writerow([row.get(column, '') for column in columns])

    return response
