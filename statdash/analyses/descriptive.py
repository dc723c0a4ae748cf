from ..formatting import fixed, format_number
from ..schema import numeric_projection, present_values
from ..stats import basic_stats, histogram, most_frequent
from .base import AnalysisBase, AnalysisResult, histogram_chart


class DescriptiveAnalysis(AnalysisBase):
    kind_name = 'descriptive'

    def compute(self, dataset, column, config=None):
        cfg = config or self.cfg
        res = AnalysisResult(kind='descriptive', column=column)
        nums = numeric_projection(dataset, column)

        if not nums:
            values = present_values(dataset, column)
            top = format_number(most_frequent(values)) if values else 'N/A'
            unique = len(set(values))
            res.computed = {'total_values': len(values), 'unique_values': unique, 'most_frequent': top}
            res.warnings.append(f'Column "{column}" has no numeric values')
            res.report_text = (
                f'Column "{column}" contains no numeric data for statistical analysis.\n\n'
                f'Data Summary:\n'
                f'- Total values: {len(values)}\n'
                f'- Unique values: {unique}\n'
                f'- Most frequent value: {top}'
            )
            return res

        st = basic_stats(nums)
        res.computed = st.as_dict()
        res.report_text = "\n".join([
            f'Descriptive Statistics for "{column}":',
            '',
            f'Count: {st.count}',
            f'Mean: {fixed(st.mean)}',
            f'Median: {fixed(st.median)}',
            f'Mode: {format_number(st.mode)}',
            f'Standard Deviation: {fixed(st.std_dev)}',
            f'Variance: {fixed(st.variance)}',
            f'Range: {fixed(st.range)}',
            f'Minimum: {format_number(st.min)}',
            f'Maximum: {format_number(st.max)}',
            f'Q1 (25th percentile): {fixed(st.q1)}',
            f'Q3 (75th percentile): {fixed(st.q3)}',
            f'Skewness: {fixed(st.skewness)}',
        ])
        res.chart = histogram_chart('descriptive', column, histogram(nums, cfg.bins))
        return res
