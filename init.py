import sys

from engine import Settings


def main(settings_path):
	print(f'settings: {Settings.create(settings_path)}')


if __name__ == '__main__':
	main(sys.argv[1] if len(sys.argv) > 1 else None)
