from ..formatting import fixed
from ..schema import numeric_projection
from ..stats import detect_outliers
from .base import AnalysisBase, AnalysisResult


class OutlierAnalysis(AnalysisBase):
    kind_name = 'outliers'

    def compute(self, dataset, column, config=None):
        cfg = config or self.cfg
        res = AnalysisResult(kind='outliers', column=column)
        nums = numeric_projection(dataset, column)
        if not nums:
            res.warnings.append(f'Column "{column}" has no numeric values')
            res.report_text = f'Column "{column}" contains no numeric data for outlier analysis.'
            return res

        out = detect_outliers(nums)
        res.computed = {
            'q1': out.q1,
            'q3': out.q3,
            'iqr': out.iqr,
            'lower_bound': out.lower,
            'upper_bound': out.upper,
            'outlier_count': out.count,
            'outlier_fraction': out.fraction,
            'outliers': list(out.outliers),
        }

        text = f'Outlier Analysis for "{column}":\n\n'
        text += f'Q1: {fixed(out.q1)}\n'
        text += f'Q3: {fixed(out.q3)}\n'
        text += f'IQR: {fixed(out.iqr)}\n'
        text += f'Lower Bound: {fixed(out.lower)}\n'
        text += f'Upper Bound: {fixed(out.upper)}\n\n'
        text += f'Outliers found: {out.count}\n'
        if out.count > 0:
            # listing is capped, the count above is not
            shown = out.outliers[:cfg.max_listed_outliers]
            text += 'Outlier values: ' + ', '.join(fixed(v) for v in shown)
            if out.count > len(shown):
                text += f' ... and {out.count - len(shown)} more'
        res.report_text = text

        res.chart = {
            'id': f'outliers_scatter_{column}',
            'chart_type': 'scatter',
            'title': f'Outlier Detection - {column}',
            'x_label': 'Data Point Index',
            'y_label': column,
            'series': [
                {
                    'label': 'Normal Values',
                    'data': [{'x': i, 'y': v} for i, v in zip(out.normal_positions, out.normal)],
                },
                {
                    'label': 'Outliers',
                    'data': [{'x': i, 'y': v} for i, v in zip(out.outlier_positions, out.outliers)],
                },
            ],
        }
        return res
