from typing import Any, Dict, List

SAMPLE_DATASETS: Dict[str, List[Dict[str, Any]]] = {
    "sales": [
        {"month": "Jan", "sales": 1200, "profit": 400, "region": "North"},
        {"month": "Feb", "sales": 1500, "profit": 600, "region": "North"},
        {"month": "Mar", "sales": 1800, "profit": 700, "region": "South"},
        {"month": "Apr", "sales": 2200, "profit": 900, "region": "East"},
        {"month": "May", "sales": 2800, "profit": 1200, "region": "West"},
        {"month": "Jun", "sales": 3200, "profit": 1500, "region": "North"},
    ],
    "population": [
        {"city": "New York", "population": 8419000, "area": 302.6, "density": 27826},
        {"city": "Los Angeles", "population": 3980000, "area": 468.7, "density": 8495},
        {"city": "Chicago", "population": 2716000, "area": 227.6, "density": 11930},
        {"city": "Houston", "population": 2328000, "area": 637.5, "density": 3653},
        {"city": "Phoenix", "population": 1690000, "area": 517.6, "density": 3267},
    ],
    "healthcare": [
        {"patientId": 1, "age": 45, "gender": "Male", "bloodPressure": "120/80", "cholesterol": 200, "disease": "None"},
        {"patientId": 2, "age": 52, "gender": "Female", "bloodPressure": "140/90", "cholesterol": 230, "disease": "Hypertension"},
        {"patientId": 3, "age": 60, "gender": "Male", "bloodPressure": "135/85", "cholesterol": 210, "disease": "None"},
        {"patientId": 4, "age": 48, "gender": "Female", "bloodPressure": "130/88", "cholesterol": 245, "disease": "High Cholesterol"},
        {"patientId": 5, "age": 70, "gender": "Male", "bloodPressure": "150/95", "cholesterol": 260, "disease": "Hypertension"},
        {"patientId": 6, "age": 65, "gender": "Female", "bloodPressure": "125/82", "cholesterol": 220, "disease": "None"},
    ],
}
