from ..formatting import fixed
from ..schema import numeric_columns, numeric_projection
from ..stats import correlation, interpret_strength
from .base import AnalysisBase, AnalysisResult


class CorrelationAnalysis(AnalysisBase):
    kind_name = 'correlation'

    def compute(self, dataset, column, config=None):
        res = AnalysisResult(kind='correlation', column=column)
        num_cols = numeric_columns(dataset)
        res.computed['numeric_columns'] = len(num_cols)

        if len(num_cols) < 2:
            res.warnings.append('Not enough numeric columns for correlation')
            res.report_text = (
                'Correlation analysis requires at least 2 numeric columns.\n'
                f'Found {len(num_cols)} numeric column(s).'
            )
            return res

        x = numeric_projection(dataset, column)
        pairs = []
        text = f'Correlation Analysis for "{column}":\n\n'
        for other in num_cols:
            if other == column:
                continue
            # projections are taken per column; unequal lengths correlate to 0
            r = correlation(x, numeric_projection(dataset, other)) + 0.0
            label = interpret_strength(r)
            pairs.append({'column': other, 'correlation': r, 'strength': label})
            text += f'{column} vs {other}: {fixed(r, 3)} ({label})\n'
        res.computed['pairs'] = pairs
        res.report_text = text

        other = next((c for c in num_cols if c != column), num_cols[0])
        y = numeric_projection(dataset, other)
        res.chart = {
            'id': f'correlation_scatter_{column}_{other}',
            'chart_type': 'scatter',
            'title': f'Correlation: {column} vs {other}',
            'x_label': column,
            'y_label': other,
            'series': [{
                'label': f'{column} vs {other}',
                'data': [{'x': a, 'y': b} for a, b in zip(x, y)],
            }],
        }
        return res
