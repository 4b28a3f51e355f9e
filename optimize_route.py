import argparse
import asyncio
import json
import logging
import random

from dotenv import load_dotenv

from route_optimizer import RouteNarrator, RouteOptimizationService, RouteOptimizerError
from route_optimizer.narration import format_duration

load_dotenv()

logging.basicConfig(level=logging.INFO,
                    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Optimize a maritime route between two ports.")
    parser.add_argument("origin", help='Origin port name or "lat, lon"')
    parser.add_argument("destination", help='Destination port name or "lat, lon"')
    parser.add_argument("--vessel-type", default="container",
                        help="container, tanker, bulk, cruise or fishing (default: container)")
    parser.add_argument("--vessel-size", default="medium",
                        help="small, medium, large or vlcc (default: medium)")
    parser.add_argument("--seed", type=int, help="Seed for reproducible waypoints and weather")
    parser.add_argument("--strict", action="store_true",
                        help="Fail on unknown locations or vessel profiles instead of guessing")
    parser.add_argument("--narrate", action="store_true", help="Ask the language model for a route analysis")
    parser.add_argument("--json", action="store_true", help="Print the full result as JSON")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser.parse_args()

def print_summary(result: dict) -> None:
    route = result['optimizedRoute']
    print(f"\n{result['origin']} -> {result['destination']}")
    print(f"  Distance: {route['distance']} nm")
    print(f"  Duration: {format_duration(route['duration'])}")
    print(f"  Fuel:     {route['fuelConsumption']} mt")
    print(f"  CO2:      {route['co2Emissions']} mt")

    print("\nWaypoints:")
    for wp, weather in zip(route['waypoints'], result['weatherConditions']):
        name = wp.get('name', '')
        print(f"  ({wp['lat']:8.3f}, {wp['lng']:8.3f}) {name:<18} {weather['conditions']}, "
              f"wind {weather['windSpeed']}kn, waves {weather['waveHeight']}m")

    print("\nAlternatives:")
    for alt in result['alternatives']:
        print(f"  {alt['name']:<26} {alt['distance']} nm, {format_duration(alt['duration'])}, "
              f"{alt['fuelConsumption']} mt fuel, risk {alt['weatherRisk']}")

    print(f"\n{result['analysis']}")

async def main() -> int:
    args = parse_args()
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    narrator = RouteNarrator() if args.narrate else None
    service = RouteOptimizationService(narrator=narrator, strict=args.strict)
    random_source = random.Random(args.seed) if args.seed is not None else None

    try:
        result = await service.optimize(args.origin, args.destination,
                                        args.vessel_type, args.vessel_size, random_source)
    except (RouteOptimizerError, ValueError) as e:
        logger.error(str(e))
        return 1
    finally:
        if narrator is not None:
            await narrator.close()

    if args.json:
        print(json.dumps(result, indent=2))
    else:
        print_summary(result)
    return 0

def run() -> None:
    raise SystemExit(asyncio.run(main()))

if __name__ == "__main__":
    run()
